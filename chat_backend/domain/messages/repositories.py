# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .entities import Message


class MessageRepository(Protocol):
    def list_all(self) -> Sequence[Message]: ...
    def add(self, sender: str, content: str) -> Message: ...

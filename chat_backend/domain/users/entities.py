# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(slots=True, frozen=True)
class Credential:

    username: str
    password_hash: str = field(repr=False)


@dataclass(slots=True, frozen=True)
class TokenClaims:

    subject: str
    issued_at: datetime
    expires_at: datetime

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import TokenClaims


class CredentialStore(Protocol):
    def exists(self, username: str) -> bool: ...
    def get_hash(self, username: str) -> str | None: ...
    def insert(self, username: str, password_hash: str) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenIssuer(Protocol):
    def issue(self, subject: str) -> str: ...
    def decode(self, token: str) -> TokenClaims: ...

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import secrets

from chat_backend.domain.users.exceptions import InvalidCredentialsError
from chat_backend.domain.users.repositories import CredentialStore, PasswordHasher, TokenIssuer


class LoginUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        password_hasher: PasswordHasher,
        tokens: TokenIssuer,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher
        self._tokens = tokens
        # Verified against for unknown users so both failures cost one verify.
        self._dummy_hash = password_hasher.hash(secrets.token_urlsafe(32))

    def execute(self, username: str, password: str) -> str:
        stored_hash = self._credentials.get_hash(username)
        password_valid = self._password_hasher.verify(password, stored_hash or self._dummy_hash)

        # Unknown user and wrong password are reported identically.
        if stored_hash is None or not password_valid:
            raise InvalidCredentialsError()

        return self._tokens.issue(username)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from chat_backend.domain.users.entities import Credential
from chat_backend.domain.users.exceptions import UserAlreadyExistsError
from chat_backend.domain.users.repositories import CredentialStore, PasswordHasher


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        credentials: CredentialStore,
        password_hasher: PasswordHasher,
    ) -> None:
        self._credentials = credentials
        self._password_hasher = password_hasher

    def execute(self, username: str, password: str) -> Credential:
        # insert() enforces uniqueness; this check only skips hashing.
        if self._credentials.exists(username):
            raise UserAlreadyExistsError()
        hashed = self._password_hasher.hash(password)
        self._credentials.insert(username, hashed)
        return Credential(username=username, password_hash=hashed)

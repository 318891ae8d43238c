# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .messages import Message, MessageRepository
from .users import (
    Credential,
    CredentialStore,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordHasher,
    TokenClaims,
    TokenIssuer,
    UserAlreadyExistsError,
)

__all__ = [
    "Credential",
    "CredentialStore",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "Message",
    "MessageRepository",
    "PasswordHasher",
    "TokenClaims",
    "TokenIssuer",
    "UserAlreadyExistsError",
]

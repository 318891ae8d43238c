# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Credential, TokenClaims
from .exceptions import InvalidCredentialsError, InvalidTokenError, UserAlreadyExistsError
from .repositories import CredentialStore, PasswordHasher, TokenIssuer

__all__ = [
    "Credential",
    "CredentialStore",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordHasher",
    "TokenClaims",
    "TokenIssuer",
    "UserAlreadyExistsError",
]

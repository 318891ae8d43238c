# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .services import JwtTokenIssuer, WerkzeugPasswordHasher
from .use_cases.messages import ListMessagesUseCase, PostMessageUseCase
from .use_cases.users import LoginUserUseCase, RegisterUserUseCase

__all__ = [
    "JwtTokenIssuer",
    "ListMessagesUseCase",
    "LoginUserUseCase",
    "PostMessageUseCase",
    "RegisterUserUseCase",
    "WerkzeugPasswordHasher",
]

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from chat_backend.application.use_cases.users.login_user import LoginUserUseCase
from chat_backend.application.use_cases.users.register_user import RegisterUserUseCase
from chat_backend.interfaces.http.dto.auth import (LoginRequestDTO,
                                                   RegisterRequestDTO,
                                                   RegisterSuccessDTO,
                                                   TokenDTO)
from chat_backend.shared.errors.validation import raise_validation_error
from chat_backend.shared.logging import logger


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True))
        except ValidationError as exc:
            raise_validation_error(exc)

        self._register_use_case.execute(dto.username, dto.password)

        logger.info(f"auth.register: ok username={dto.username}")
        return jsonify(RegisterSuccessDTO().model_dump()), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True))
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except Exception as exc:
            logger.info(f"auth.login: failed username={dto.username} error={exc}")
            raise

        logger.info(f"auth.login: ok username={dto.username}")
        return jsonify(TokenDTO(token=token).model_dump()), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        return bp

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from chat_backend.application.use_cases.messages.list_messages import ListMessagesUseCase
from chat_backend.application.use_cases.messages.post_message import PostMessageUseCase
from chat_backend.interfaces.http.dto.messages import PostMessageRequestDTO
from chat_backend.shared.errors.validation import raise_validation_error
from chat_backend.shared.logging import logger


class MessagesController:
    def __init__(
        self,
        *,
        list_use_case: ListMessagesUseCase,
        post_use_case: PostMessageUseCase,
    ) -> None:
        self._list_use_case = list_use_case
        self._post_use_case = post_use_case

    def list_messages(self) -> tuple[Response, int]:
        messages = self._list_use_case.execute()
        return jsonify([message.to_dict() for message in messages]), HTTPStatus.OK

    def post_message(self) -> tuple[Response, int]:
        try:
            dto = PostMessageRequestDTO.model_validate(request.get_json(silent=True))
        except ValidationError as exc:
            raise_validation_error(exc)

        message = self._post_use_case.execute(dto.sender, dto.content)
        logger.info(f"messages.post: ok id={message.id} sender={message.sender}")
        return jsonify(message.to_dict()), HTTPStatus.CREATED

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("messages", __name__, url_prefix="/api")
        bp.add_url_rule("/messages", view_func=self.list_messages, methods=["GET"])
        bp.add_url_rule("/messages", view_func=self.post_message, methods=["POST"])
        return bp

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timedelta
from functools import cached_property

from sqlalchemy.orm import Session

from chat_backend.application.services.password_hashing import \
    WerkzeugPasswordHasher
from chat_backend.application.services.token_issuer import (JwtTokenIssuer,
                                                            utc_now)
from chat_backend.application.use_cases.messages.list_messages import \
    ListMessagesUseCase
from chat_backend.application.use_cases.messages.post_message import \
    PostMessageUseCase
from chat_backend.application.use_cases.users.login_user import LoginUserUseCase
from chat_backend.application.use_cases.users.register_user import \
    RegisterUserUseCase
from chat_backend.domain.messages.repositories import MessageRepository
from chat_backend.domain.users.repositories import (CredentialStore,
                                                    PasswordHasher,
                                                    TokenIssuer)
from chat_backend.infrastructure.db import SessionLocal
from chat_backend.infrastructure.observability import (PrometheusMetricsSink,
                                                       default_metrics_sink)
from chat_backend.infrastructure.repositories.messages.sqlalchemy_message_repository import \
    SqlAlchemyMessageRepository
from chat_backend.infrastructure.repositories.users.sqlalchemy_credential_store import \
    SqlAlchemyCredentialStore
from chat_backend.interfaces.http.controllers.auth_controller import AuthController
from chat_backend.interfaces.http.controllers.messages_controller import \
    MessagesController
from chat_backend.interfaces.http.controllers.misc_controller import MiscController
from chat_backend.shared.config import AppConfig, load_config


class Container:
    """Wires stores, services, use cases and controllers.

    Every cached property can be overridden by assigning the attribute
    before it is first read, which is how tests swap in doubles.
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        session_factory: Callable[[], Session] = SessionLocal,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.config = config or load_config()
        self._session_factory = session_factory
        self._clock = clock

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.auth.password_hash_method)

    @cached_property
    def token_issuer(self) -> TokenIssuer:
        return JwtTokenIssuer(
            secret=self.config.auth.jwt_secret,
            lifetime=timedelta(seconds=self.config.auth.token_lifetime_seconds),
            algorithm=self.config.auth.jwt_algorithm,
            clock=self._clock,
        )

    @cached_property
    def credential_store(self) -> CredentialStore:
        return SqlAlchemyCredentialStore(self._session_factory)

    @cached_property
    def message_repository(self) -> MessageRepository:
        return SqlAlchemyMessageRepository(self._session_factory)

    @cached_property
    def metrics_sink(self) -> PrometheusMetricsSink:
        return default_metrics_sink()

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            credentials=self.credential_store,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            credentials=self.credential_store,
            password_hasher=self.password_hasher,
            tokens=self.token_issuer,
        )

    @cached_property
    def list_messages_use_case(self) -> ListMessagesUseCase:
        return ListMessagesUseCase(messages=self.message_repository)

    @cached_property
    def post_message_use_case(self) -> PostMessageUseCase:
        return PostMessageUseCase(messages=self.message_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
        )

    @cached_property
    def messages_controller(self) -> MessagesController:
        return MessagesController(
            list_use_case=self.list_messages_use_case,
            post_use_case=self.post_message_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        metrics = self.metrics_sink if self.config.observability.metrics_enabled else None
        return MiscController(metrics=metrics)

# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from chat_backend.domain.users.exceptions import UserAlreadyExistsError
from chat_backend.domain.users.repositories import CredentialStore
from chat_backend.infrastructure.db.models import UserRecord
from chat_backend.infrastructure.unit_of_work import unit_of_work_scope
from chat_backend.shared.errors import CredentialStoreError


class SqlAlchemyCredentialStore(CredentialStore):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def exists(self, username: str) -> bool:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                return bool(
                    session.scalar(select(exists().where(UserRecord.username == username)))
                )
        except SQLAlchemyError as exc:
            raise CredentialStoreError() from exc

    def get_hash(self, username: str) -> str | None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                return session.scalar(
                    select(UserRecord.password_hash).where(UserRecord.username == username)
                )
        except SQLAlchemyError as exc:
            raise CredentialStoreError() from exc

    def insert(self, username: str, password_hash: str) -> None:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                session.add(UserRecord(username=username, password_hash=password_hash))
                session.flush()
        except IntegrityError as exc:
            raise UserAlreadyExistsError() from exc
        except SQLAlchemyError as exc:
            raise CredentialStoreError() from exc

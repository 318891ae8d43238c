# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable, Sequence

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from chat_backend.domain.messages.entities import Message
from chat_backend.domain.messages.repositories import MessageRepository
from chat_backend.infrastructure.db.models import MessageRecord
from chat_backend.infrastructure.unit_of_work import unit_of_work_scope
from chat_backend.shared.errors import MessageStoreError


def _to_domain(row: MessageRecord) -> Message:
    return Message(id=row.id, sender=row.sender, content=row.content, timestamp=row.timestamp)


class SqlAlchemyMessageRepository(MessageRepository):
    def __init__(self, session_factory: Callable[[], Session]):
        self._session_factory = session_factory

    def list_all(self) -> Sequence[Message]:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                rows = session.scalars(
                    select(MessageRecord).order_by(
                        MessageRecord.timestamp.asc(), MessageRecord.id.asc()
                    )
                ).all()
                return [_to_domain(row) for row in rows]
        except SQLAlchemyError as exc:
            raise MessageStoreError() from exc

    def add(self, sender: str, content: str) -> Message:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = MessageRecord(sender=sender, content=content)
                session.add(row)
                session.flush()
                session.refresh(row)
                return _to_domain(row)
        except SQLAlchemyError as exc:
            raise MessageStoreError() from exc

"""Use-case for reading the chat history."""

from __future__ import annotations

from collections.abc import Sequence

from chat_backend.domain.messages.entities import Message
from chat_backend.domain.messages.repositories import MessageRepository


class ListMessagesUseCase:
    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self) -> Sequence[Message]:
        return self._messages.list_all()

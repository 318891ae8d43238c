"""Use-case for appending a message to the chat history."""

from __future__ import annotations

from chat_backend.domain.messages.entities import Message
from chat_backend.domain.messages.repositories import MessageRepository


class PostMessageUseCase:
    def __init__(self, *, messages: MessageRepository) -> None:
        self._messages = messages

    def execute(self, sender: str, content: str) -> Message:
        return self._messages.add(sender, content)

from .list_messages import ListMessagesUseCase
from .post_message import PostMessageUseCase

__all__ = ["ListMessagesUseCase", "PostMessageUseCase"]

from .models import ChatMessageContainer, ChatMessageContent, ChatMessageType
from .service import ChatError, ChatService

__all__ = [
    "ChatMessageContainer",
    "ChatMessageContent",
    "ChatMessageType",
    "ChatError",
    "ChatService",
]

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ChatMessageType(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


class ChatMessageContent(BaseModel):
    message: str


class ChatMessageContainer(BaseModel):
    """One transcript entry: a role plus one or more text parts."""

    message_type: ChatMessageType
    message_content: List[ChatMessageContent] = Field(default_factory=list)
    name: Optional[str] = None

    @classmethod
    def of(cls, message_type: ChatMessageType, text: str, name: Optional[str] = None) -> "ChatMessageContainer":
        return cls(message_type=message_type, message_content=[ChatMessageContent(message=text)], name=name)

    @classmethod
    def system(cls, text: str) -> "ChatMessageContainer":
        return cls.of(ChatMessageType.SYSTEM, text)

    @classmethod
    def user(cls, text: str, name: Optional[str] = None) -> "ChatMessageContainer":
        return cls.of(ChatMessageType.USER, text, name)

    @classmethod
    def assistant(cls, text: str) -> "ChatMessageContainer":
        return cls.of(ChatMessageType.ASSISTANT, text)

    @property
    def text(self) -> str:
        return "\n".join(part.message for part in self.message_content)

    def to_messages(self) -> List[Dict[str, str]]:
        return [{"role": self.message_type.value, "content": part.message} for part in self.message_content]

    def __str__(self) -> str:
        return f"{self.message_type.value}: {self.text}"


__all__ = ["ChatMessageType", "ChatMessageContent", "ChatMessageContainer"]

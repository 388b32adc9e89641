from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

import httpx
import ollama
from ollama import ResponseError

from ..console_input.sinks import LineSink
from .models import ChatMessageContainer

logger = logging.getLogger(__name__)


class ChatError(RuntimeError):
    """Raised when the chat backend cannot produce a reply."""


class ChatService:
    """
    Thin gateway around the Ollama chat API.
    Turns a transcript into role/content messages and returns the reply text.
    """

    def __init__(self, model: str, host: Optional[str] = None, client: Optional[Any] = None) -> None:
        self.model = model
        self.client = client if client is not None else ollama.Client(host=host)

    # -------------------------------------------------

    @staticmethod
    def prepare_messages(history: Sequence[ChatMessageContainer]) -> List[Dict[str, str]]:
        messages: List[Dict[str, str]] = []
        for container in history:
            messages.extend(container.to_messages())
        return messages

    def perform_chat(self, history: Sequence[ChatMessageContainer]) -> str:
        messages = self.prepare_messages(history)
        logger.debug("Sending %d message(s) to %s", len(messages), self.model)
        try:
            response = self.client.chat(model=self.model, messages=messages)
        except (ResponseError, ConnectionError, httpx.HTTPError) as exc:
            logger.warning("Chat request to %s failed: %s", self.model, exc)
            raise ChatError(str(exc)) from exc
        return self._extract_content(response).strip()

    def process_response(self, text: str, history: List[ChatMessageContainer], sink: LineSink) -> None:
        if not text:
            sink.write("No response from chatbot.", color="magenta")
            return
        sink.write(f"Bot: {text}", color="magenta")
        history.append(ChatMessageContainer.assistant(text))

    # -------------------------------------------------

    @staticmethod
    def _extract_content(response: Any) -> str:
        """Reply text from an ollama ChatResponse or its plain-dict form."""
        if isinstance(response, dict):
            message = response.get("message") or {}
            return str(message.get("content") or "")
        message = getattr(response, "message", None)
        return str(getattr(message, "content", None) or "")


__all__ = ["ChatError", "ChatService"]

from __future__ import annotations

from typing import Any, Dict, List

import pytest
from ollama import ResponseError

from talktome.chat.models import ChatMessageContainer, ChatMessageContent, ChatMessageType
from talktome.chat.service import ChatError, ChatService


class FakeClient:
    def __init__(self, reply: Any = None, error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def chat(self, model: str, messages: List[Dict[str, str]]):
        self.calls.append({"model": model, "messages": messages})
        if self.error is not None:
            raise self.error
        return self.reply


def test_prepare_messages_flattens_parts():
    multi = ChatMessageContainer(
        message_type=ChatMessageType.USER,
        message_content=[ChatMessageContent(message="a"), ChatMessageContent(message="b")],
    )
    messages = ChatService.prepare_messages([ChatMessageContainer.system("s"), multi])
    assert messages == [
        {"role": "system", "content": "s"},
        {"role": "user", "content": "a"},
        {"role": "user", "content": "b"},
    ]


def test_perform_chat_returns_reply_text():
    client = FakeClient(reply={"message": {"role": "assistant", "content": "  hi there "}})
    service = ChatService("llama3", client=client)
    assert service.perform_chat([ChatMessageContainer.user("hello")]) == "hi there"
    assert client.calls[0]["model"] == "llama3"
    assert client.calls[0]["messages"] == [{"role": "user", "content": "hello"}]


def test_perform_chat_empty_reply():
    service = ChatService("llama3", client=FakeClient(reply={"message": None}))
    assert service.perform_chat([]) == ""


@pytest.mark.parametrize("error", [ResponseError("model not found"), ConnectionError("refused")])
def test_backend_errors_become_chat_error(error):
    service = ChatService("llama3", client=FakeClient(error=error))
    with pytest.raises(ChatError):
        service.perform_chat([ChatMessageContainer.user("hello")])


def test_process_response_appends_assistant(sink):
    history: List[ChatMessageContainer] = []
    ChatService("m", client=FakeClient()).process_response("hello", history, sink)
    assert history == [ChatMessageContainer.assistant("hello")]
    assert sink.records == [("Bot: hello", "magenta")]


def test_process_empty_response(sink):
    history: List[ChatMessageContainer] = []
    ChatService("m", client=FakeClient()).process_response("", history, sink)
    assert history == []
    assert sink.lines == ["No response from chatbot."]


class _Message:
    def __init__(self, content):
        self.content = content


class _Response:
    def __init__(self, content):
        self.message = _Message(content)


def test_reply_read_from_response_object():
    service = ChatService("llama3", client=FakeClient(reply=_Response(" object reply ")))
    assert service.perform_chat([]) == "object reply"
    assert ChatService._extract_content(_Response(None)) == ""

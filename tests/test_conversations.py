from __future__ import annotations

import json
from pathlib import Path

import pytest

from talktome.chat.models import ChatMessageContainer, ChatMessageType
from talktome.conversations import ConversationManager, conversation_name


@pytest.fixture
def manager(tmp_path: Path) -> ConversationManager:
    return ConversationManager(tmp_path / "Conversations")


def test_folder_created(tmp_path: Path):
    ConversationManager(tmp_path / "nested" / "store")
    assert (tmp_path / "nested" / "store").is_dir()


def test_save_and_load(manager: ConversationManager):
    history = [
        ChatMessageContainer.system("be brief"),
        ChatMessageContainer.user("hi"),
        ChatMessageContainer.assistant("hello"),
    ]
    path = manager.save_conversation(history, "greeting")
    assert path.name == "greeting.json"
    assert not path.with_suffix(".json.tmp").exists()

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert raw[1] == {"message_type": "user", "message_content": [{"message": "hi"}], "name": None}

    loaded = manager.load_conversation("greeting.json")
    assert loaded == history
    assert loaded[2].message_type is ChatMessageType.ASSISTANT


def test_load_missing_returns_empty(manager: ConversationManager):
    assert manager.load_conversation("nothing.json") == []


def test_load_rejects_non_array(manager: ConversationManager):
    manager.path_for("bad.json").write_text('{"a": 1}', encoding="utf-8")
    with pytest.raises(ValueError):
        manager.load_conversation("bad.json")


def test_list_is_one_based_and_sorted(manager: ConversationManager):
    manager.save_conversation([], "beta")
    manager.save_conversation([], "alpha")
    manager.path_for("notes.txt").write_text("x", encoding="utf-8")
    assert manager.list_conversations() == {1: "alpha.json", 2: "beta.json"}


def test_delete(manager: ConversationManager):
    manager.save_conversation([], "old")
    assert manager.delete_conversation("old.json") is True
    assert manager.delete_conversation("old.json") is False
    assert manager.list_conversations() == {}


def test_conversation_name():
    assert conversation_name("chat.json") == "chat"
    assert conversation_name("chat") == "chat"


def test_save_leaves_no_staging_files(manager: ConversationManager):
    manager.save_conversation([ChatMessageContainer.user("a")], "x")
    manager.save_conversation([ChatMessageContainer.user("b")], "x")
    assert sorted(p.name for p in manager.base_folder.iterdir()) == ["x.json"]
    assert manager.load_conversation("x.json")[0].text == "b"

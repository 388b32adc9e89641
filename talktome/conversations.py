from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Sequence

from .chat.models import ChatMessageContainer

logger = logging.getLogger(__name__)


def atomic_write_json(path: Path, obj: object) -> None:
    """Serialise next to the target, then swap it in with os.replace."""
    fd, staging = tempfile.mkstemp(dir=path.parent, prefix=f".{path.stem}-", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            json.dump(obj, handle, ensure_ascii=False, indent=2)
        os.replace(staging, path)
    except BaseException:
        Path(staging).unlink(missing_ok=True)
        raise


class ConversationManager:
    """One JSON transcript per conversation, all in one folder."""

    def __init__(self, base_folder: str | Path = "Conversations") -> None:
        self.base_folder = Path(base_folder)
        self.base_folder.mkdir(parents=True, exist_ok=True)

    def path_for(self, file_name: str) -> Path:
        return self.base_folder / file_name

    def save_conversation(self, history: Sequence[ChatMessageContainer], name: str) -> Path:
        path = self.path_for(f"{name}.json")
        atomic_write_json(path, [message.model_dump(mode="json") for message in history])
        logger.debug("Saved %d message(s) to %s", len(history), path)
        return path

    def load_conversation(self, file_name: str) -> List[ChatMessageContainer]:
        path = self.path_for(file_name)
        if not path.exists():
            return []
        text = path.read_text(encoding="utf-8").strip()
        if not text:
            return []
        data = json.loads(text)
        if not isinstance(data, list):
            raise ValueError(f"Conversation file {path} must contain a JSON array.")
        return [ChatMessageContainer.model_validate(item) for item in data]

    def delete_conversation(self, file_name: str) -> bool:
        path = self.path_for(file_name)
        if not path.is_file():
            return False
        path.unlink()
        logger.debug("Deleted %s", path)
        return True

    def list_conversations(self) -> Dict[int, str]:
        files = sorted(p.name for p in self.base_folder.glob("*.json") if p.is_file())
        return {index: name for index, name in enumerate(files, 1)}


def conversation_name(file_name: str) -> str:
    return file_name[: -len(".json")] if file_name.endswith(".json") else file_name


__all__ = ["ConversationManager", "atomic_write_json", "conversation_name"]

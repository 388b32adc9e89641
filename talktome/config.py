from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional

DEFAULT_CONFIG_FILE = "appsettings.json"
DEFAULT_CONVERSATIONS_FOLDER = "Conversations"


class ConfigError(RuntimeError):
    """Raised when settings are missing or unreadable."""


@dataclass
class AppConfig:
    model: str
    host: Optional[str] = None
    conversations_folder: str = DEFAULT_CONVERSATIONS_FOLDER
    system_prompt: Optional[str] = None


def _read_settings(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        return {}
    try:
        obj = json.loads(path.read_text(encoding="utf-8") or "{}")
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Cannot read {path}: {exc}") from exc
    if not isinstance(obj, dict):
        raise ConfigError(f"{path} must contain a JSON object.")
    return obj


def _section(settings: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    value = settings.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"'{name}' in settings must be an object.")
    return value


def load_config(
    path: str | Path = DEFAULT_CONFIG_FILE,
    env: Optional[Mapping[str, str]] = None,
) -> AppConfig:
    """
    Settings file first, then environment overrides:
    TALKTOME_MODEL, OLLAMA_HOST, TALKTOME_CONVERSATIONS.
    """
    env = os.environ if env is None else env
    settings = _read_settings(Path(path))
    ollama_section = _section(settings, "Ollama")
    conversations_section = _section(settings, "Conversations")

    model = (env.get("TALKTOME_MODEL") or ollama_section.get("Model") or "").strip()
    if not model:
        raise ConfigError(f"Model is missing in {path} (Ollama:Model) and TALKTOME_MODEL is not set.")

    host = env.get("OLLAMA_HOST") or ollama_section.get("Host") or None
    folder = (
        env.get("TALKTOME_CONVERSATIONS")
        or conversations_section.get("Folder")
        or DEFAULT_CONVERSATIONS_FOLDER
    )
    return AppConfig(
        model=model,
        host=host,
        conversations_folder=folder,
        system_prompt=settings.get("SystemPrompt") or None,
    )


__all__ = ["AppConfig", "ConfigError", "load_config", "DEFAULT_CONFIG_FILE"]

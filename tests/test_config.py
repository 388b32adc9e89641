from __future__ import annotations

import json
from pathlib import Path

import pytest

from talktome.config import DEFAULT_CONVERSATIONS_FOLDER, ConfigError, load_config


def _write(path: Path, obj) -> Path:
    path.write_text(json.dumps(obj), encoding="utf-8")
    return path


def test_reads_settings_file(tmp_path: Path):
    path = _write(
        tmp_path / "appsettings.json",
        {
            "Ollama": {"Model": "llama3", "Host": "http://box:11434"},
            "Conversations": {"Folder": "chats"},
            "SystemPrompt": "Be kind.",
        },
    )
    config = load_config(path, env={})
    assert config.model == "llama3"
    assert config.host == "http://box:11434"
    assert config.conversations_folder == "chats"
    assert config.system_prompt == "Be kind."


def test_environment_overrides(tmp_path: Path):
    path = _write(tmp_path / "appsettings.json", {"Ollama": {"Model": "llama3"}})
    env = {"TALKTOME_MODEL": "qwen", "OLLAMA_HOST": "http://h", "TALKTOME_CONVERSATIONS": "elsewhere"}
    config = load_config(path, env=env)
    assert (config.model, config.host, config.conversations_folder) == ("qwen", "http://h", "elsewhere")


def test_missing_file_with_env_model(tmp_path: Path):
    config = load_config(tmp_path / "absent.json", env={"TALKTOME_MODEL": "llama3"})
    assert config.model == "llama3"
    assert config.host is None
    assert config.conversations_folder == DEFAULT_CONVERSATIONS_FOLDER


def test_missing_model_is_an_error(tmp_path: Path):
    path = _write(tmp_path / "appsettings.json", {"Ollama": {}})
    with pytest.raises(ConfigError):
        load_config(path, env={})


def test_invalid_json_is_an_error(tmp_path: Path):
    path = tmp_path / "appsettings.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path, env={"TALKTOME_MODEL": "x"})


def test_section_must_be_object(tmp_path: Path):
    path = _write(tmp_path / "appsettings.json", {"Ollama": "llama3"})
    with pytest.raises(ConfigError):
        load_config(path, env={})

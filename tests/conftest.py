# tests/conftest.py
# Shared fixtures: scripted line source, recording sink, sample enums.

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from talktome.console_input import RecordingSink, ScriptedSource  # noqa: E402


class Difficulty(Enum):
    Easy = 0
    Normal = 1
    Hard = 2


class Color(Enum):
    RED = "r"
    GREEN = "g"
    BLUE = "b"


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def scripted():
    """Build a ScriptedSource from a list of lines."""
    def _make(*lines: str) -> ScriptedSource:
        return ScriptedSource(lines)
    return _make

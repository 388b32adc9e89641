from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from rich.console import Console


class LineSink(Protocol):
    def write(self, text: str, color: Optional[str] = None) -> None:
        ...


class ConsoleSink:
    """Writes prompts and diagnostics to the terminal; color is a rich style name."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def write(self, text: str, color: Optional[str] = None) -> None:
        self.console.print(text, style=color, markup=False, highlight=False)


class RecordingSink:
    """Keeps written lines in memory."""

    def __init__(self) -> None:
        self.records: List[Tuple[str, Optional[str]]] = []

    def write(self, text: str, color: Optional[str] = None) -> None:
        self.records.append((text, color))

    @property
    def lines(self) -> List[str]:
        return [text for text, _ in self.records]

    def text(self) -> str:
        return "\n".join(self.lines)


__all__ = ["LineSink", "ConsoleSink", "RecordingSink"]

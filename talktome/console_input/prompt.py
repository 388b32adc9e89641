from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence

from .categories import AcquisitionRequest, ValueCategory, classify
from .converters import Accepted, ParseOutcome, convert
from .presenter import present_options
from .sinks import ConsoleSink, LineSink

logger = logging.getLogger(__name__)

LineSource = Callable[..., Optional[str]]

RETRY_HINT = "Please try again."


class ScriptedSource:
    """Line source that replays a fixed list of lines, then signals end of input."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.prompts: list[str] = []

    def __call__(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        try:
            return next(self._lines)
        except StopIteration:
            raise EOFError("input exhausted") from None


class PromptLoop:
    """
    Drives one acquisition at a time:
    message and options once, then read / validate / retry until a value is accepted.
    """

    def __init__(self, source: Optional[LineSource] = None, sink: Optional[LineSink] = None) -> None:
        self.source = source or input
        self.sink = sink or ConsoleSink()

    def read_line(self) -> str:
        line = self.source()
        if line is None:
            raise EOFError("input stream closed")
        return line

    def present(self, request: AcquisitionRequest, category: ValueCategory) -> None:
        if request.message is not None:
            self.sink.write(request.message)
        present_options(request, category, self.sink)

    def validate(self, line: str, request: AcquisitionRequest, category: ValueCategory) -> ParseOutcome:
        return convert(line, request, category)

    def report(self, reason: str) -> None:
        self.sink.write(f"{reason} {RETRY_HINT}", color="red")

    def acquire(self, request: AcquisitionRequest) -> Any:
        category = classify(request)
        logger.debug("Acquiring %s as %s", request.kind.type_name, type(category).__name__)
        self.present(request, category)

        attempts = 0
        while True:
            line = self.read_line()
            attempts += 1
            outcome = self.validate(line, request, category)
            if isinstance(outcome, Accepted):
                logger.debug("Accepted %r after %d attempt(s)", outcome.value, attempts)
                return outcome.value
            self.report(outcome.reason)


def get_input(
    target: Any,
    message: Optional[str] = None,
    *,
    is_range: bool = False,
    allow_number_input: bool = True,
    show_options: bool = True,
    string_options: Optional[Sequence[str]] = None,
    enum_options: Optional[Sequence[Any]] = None,
    source: Optional[LineSource] = None,
    sink: Optional[LineSink] = None,
) -> Any:
    """
    Prompt until the user enters a valid value of ``target``.

    target: bool, int, float, Decimal, Fraction, str, an Enum subclass,
        or any callable that builds a value from text.
    is_range: with two string_options over a numeric target, accept values
        between them (inclusive); with two enum_options over an Enum target,
        accept members whose ordinal lies between them.
    allow_number_input: let the user pick options by their 1-based number.
    string_options: fixed text choices; with a bool target, a two-item list is
        read as a true/false pair.
    enum_options: a subset of values (usually Enum members) to choose from.

    Raises EOFError when the input stream ends before a valid value is read.
    """
    request = AcquisitionRequest(
        target=target,
        message=message,
        is_range=is_range,
        allow_number_input=allow_number_input,
        show_options=show_options,
        string_options=tuple(string_options) if string_options is not None else None,
        enum_options=tuple(enum_options) if enum_options is not None else None,
    )
    return PromptLoop(source, sink).acquire(request)


__all__ = ["LineSource", "ScriptedSource", "PromptLoop", "get_input", "RETRY_HINT"]

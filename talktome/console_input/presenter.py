from __future__ import annotations

from typing import List

from .categories import (
    AcquisitionRequest,
    EnumMembers,
    EnumOptions,
    EnumRange,
    NumericRange,
    StringOptions,
    ValueCategory,
)
from .sinks import LineSink

OPTIONS_HEADER = "Please enter one of the available options:"


def _numbered(position: int, display: str, allow_number_input: bool) -> str:
    return f"{position}: {display}" if allow_number_input else display


def render_options(request: AcquisitionRequest, category: ValueCategory) -> List[str]:
    """Describe the choices for a category; advisory text only."""
    if not request.show_options:
        return []

    kind = request.kind
    if isinstance(category, EnumRange):
        low, high = kind.ordinal(category.minimum), kind.ordinal(category.maximum)
        lines = [OPTIONS_HEADER]
        for ordinal in range(low, high + 1):
            try:
                member = kind.from_ordinal(ordinal)
            except ValueError:
                continue
            lines.append(f"{ordinal + 1}: {member.name}")
        return lines

    if isinstance(category, NumericRange):
        return [f"Please enter a value between {category.minimum} and {category.maximum}:"]

    if isinstance(category, (EnumOptions, StringOptions)):
        lines = [OPTIONS_HEADER]
        for position, option in enumerate(category.options, 1):
            display = kind.display(option) if isinstance(category, EnumOptions) else option
            lines.append(_numbered(position, display, request.allow_number_input))
        return lines

    if isinstance(category, EnumMembers):
        lines = [OPTIONS_HEADER]
        for member in kind.members():
            lines.append(f"{kind.ordinal(member) + 1}: {member.name}")
        return lines

    return [f"Please enter a value of type: {kind.type_name}"]


def present_options(request: AcquisitionRequest, category: ValueCategory, sink: LineSink) -> None:
    for line in render_options(request, category):
        sink.write(line)


__all__ = ["OPTIONS_HEADER", "render_options", "present_options"]

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence, Union

from .categories import (
    AcquisitionRequest,
    EnumMembers,
    EnumOptions,
    EnumRange,
    GenericScalar,
    NumericRange,
    StringOptions,
    ValueCategory,
)
from .errors import BlankInputError, InputRangeError, InputRejected, NoMatchError
from .scalars import EnumKind, is_nan, parse_index, same_text

logger = logging.getLogger(__name__)


# ================================
# Outcomes
# ================================

@dataclass(frozen=True)
class Accepted:
    value: Any


@dataclass(frozen=True)
class Rejected:
    reason: str
    error: InputRejected


ParseOutcome = Union[Accepted, Rejected]


# ================================
# Per-category matchers
# ================================

def match_boolean_pair(text: str, options: Sequence[str]) -> bool:
    """options[0] (or "1") means True, options[1] (or "2") means False."""
    if same_text(text, options[0]):
        return True
    if same_text(text, options[1]):
        return False
    index = parse_index(text)
    if index == 1:
        return True
    if index == 2:
        return False
    raise NoMatchError(f"Please answer {options[0]} or {options[1]}.")


def match_numeric_range(text: str, request: AcquisitionRequest, category: NumericRange) -> Any:
    value = request.kind.convert(text)
    try:
        if not is_nan(value) and category.minimum <= value <= category.maximum:
            return value
    except ArithmeticError as exc:
        raise InputRangeError(f"{value} cannot be compared with the range.") from exc
    raise InputRangeError(
        f"{value} is not between {category.minimum} and {category.maximum}."
    )


def match_enum_member(text: str, kind: EnumKind, allow_number_input: bool) -> Any:
    try:
        return kind.convert(text)
    except NoMatchError:
        index = parse_index(text) if allow_number_input else None
        if index is None:
            raise
    return kind.from_ordinal(index - 1)


def match_enum_range(text: str, request: AcquisitionRequest, category: EnumRange) -> Any:
    kind = request.kind
    member = match_enum_member(text, kind, allow_number_input=True)
    low, high = kind.ordinal(category.minimum), kind.ordinal(category.maximum)
    if low <= kind.ordinal(member) <= high:
        return member
    raise InputRangeError(
        f"{member.name} is not between {category.minimum.name} and {category.maximum.name}."
    )


def _match_option(text: str, displays: Sequence[str], allow_number_input: bool) -> int:
    """
    Return the 0-based position of the option the text selects.
    Options are checked in order; each one matches by its text, then by its
    1-based number, so with ["2", "1"] the input "1" selects "2".
    """
    index = parse_index(text) if allow_number_input else None
    for position, display in enumerate(displays):
        if same_text(text, display) or index == position + 1:
            return position
    raise NoMatchError(f"'{text.strip()}' is not one of the available options.")


def match_enum_options(text: str, request: AcquisitionRequest, category: EnumOptions) -> Any:
    displays = [request.kind.display(option) for option in category.options]
    position = _match_option(text, displays, request.allow_number_input)
    return category.options[position]


def match_string_options(text: str, request: AcquisitionRequest, category: StringOptions) -> Any:
    position = _match_option(text, category.options, request.allow_number_input)
    return request.kind.convert(category.options[position])


def match_enum_members(text: str, request: AcquisitionRequest, category: EnumMembers) -> Any:
    return match_enum_member(text, request.kind, request.allow_number_input)


def match_generic(text: str, request: AcquisitionRequest, category: GenericScalar) -> Any:
    return request.kind.convert(text)


MATCHERS: Dict[type, Callable[[str, AcquisitionRequest, Any], Any]] = {
    NumericRange: match_numeric_range,
    EnumRange: match_enum_range,
    EnumOptions: match_enum_options,
    StringOptions: match_string_options,
    EnumMembers: match_enum_members,
    GenericScalar: match_generic,
}


def _boolean_pair(request: AcquisitionRequest) -> Optional[Sequence[str]]:
    options = request.string_options
    if request.kind.is_boolean and options is not None and len(options) == 2:
        return options
    return None


def convert(text: Optional[str], request: AcquisitionRequest, category: ValueCategory) -> ParseOutcome:
    """Validate one raw line against a request; never raises for bad input."""
    try:
        if text is None or not text.strip():
            raise BlankInputError("Invalid input.")
        pair = _boolean_pair(request)
        if pair is not None:
            return Accepted(match_boolean_pair(text, pair))
        matcher = MATCHERS[type(category)]
        return Accepted(matcher(text, request, category))
    except InputRejected as exc:
        logger.debug("Rejected %r for %s: %s", text, request.kind.type_name, exc)
        return Rejected(str(exc), exc)


__all__ = [
    "Accepted",
    "Rejected",
    "ParseOutcome",
    "MATCHERS",
    "convert",
    "match_boolean_pair",
    "match_numeric_range",
    "match_enum_range",
    "match_enum_options",
    "match_string_options",
    "match_enum_members",
    "match_generic",
]

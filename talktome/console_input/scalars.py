from __future__ import annotations

import enum
import math
import re
from decimal import Decimal, InvalidOperation
from fractions import Fraction
from typing import Any, Callable, List, Optional, Tuple

from .errors import InputFormatError, NoMatchError

_INDEX_RE = re.compile(r"^[+-]?\d+$")


def parse_index(text: str) -> Optional[int]:
    """Parse a plain integer used for 1-based selection, or None."""
    cleaned = text.strip()
    if not _INDEX_RE.match(cleaned):
        return None
    try:
        return int(cleaned)
    except ValueError:
        # longer than the interpreter allows for int()
        return None


def is_nan(value: Any) -> bool:
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    return False


def same_text(left: str, right: str) -> bool:
    return left.strip().casefold() == right.strip().casefold()


# ================================
# Scalar kinds
# ================================

class ScalarKind:
    """Capabilities of one supported target type."""

    is_numeric = False
    is_enum = False
    is_boolean = False

    def __init__(self, target: Any) -> None:
        self.target = target

    @property
    def type_name(self) -> str:
        return getattr(self.target, "__name__", str(self.target))

    def convert(self, text: str) -> Any:
        raise NotImplementedError

    def display(self, value: Any) -> str:
        return str(value)


class BooleanKind(ScalarKind):
    is_boolean = True

    _TRUE = "true"
    _FALSE = "false"

    def convert(self, text: str) -> bool:
        cleaned = text.strip().casefold()
        if cleaned == self._TRUE:
            return True
        if cleaned == self._FALSE:
            return False
        raise InputFormatError(f"Invalid format for type {self.type_name}.")


class NumericKind(ScalarKind):
    is_numeric = True

    def convert(self, text: str) -> Any:
        try:
            return self.target(text.strip())
        except (ValueError, TypeError, ArithmeticError, InvalidOperation) as exc:
            raise InputFormatError(f"Invalid format for type {self.type_name}.") from exc


class StringKind(ScalarKind):
    def convert(self, text: str) -> str:
        return text.strip()


class EnumKind(ScalarKind):
    """Enumeration members addressed by name or by ordinal."""

    is_enum = True

    def members(self) -> List[enum.Enum]:
        return list(self.target)

    def ordinal(self, member: enum.Enum) -> int:
        value = member.value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        return self.members().index(member)

    def is_member(self, value: Any) -> bool:
        return isinstance(value, self.target)

    def from_ordinal(self, ordinal: int) -> enum.Enum:
        for member in self.members():
            if self.ordinal(member) == ordinal:
                return member
        raise NoMatchError(f"{ordinal + 1} is not an option of {self.type_name}.")

    def convert(self, text: str) -> enum.Enum:
        for name, member in self.target.__members__.items():
            if same_text(text, name):
                return member
        raise NoMatchError(f"'{text.strip()}' is not an option of {self.type_name}.")

    def display(self, value: Any) -> str:
        if isinstance(value, enum.Enum):
            return value.name
        return str(value)


class GenericKind(ScalarKind):
    def convert(self, text: str) -> Any:
        try:
            return self.target(text)
        except Exception as exc:
            raise InputFormatError(f"Invalid format for type {self.type_name}.") from exc


NUMERIC_TYPES: Tuple[type, ...] = (int, float, Decimal, Fraction)

_REGISTRY: List[Tuple[Callable[[Any], bool], Callable[[Any], ScalarKind]]] = [
    (lambda t: t is bool, BooleanKind),
    (lambda t: isinstance(t, type) and issubclass(t, enum.Enum), EnumKind),
    (lambda t: t in NUMERIC_TYPES, NumericKind),
    (lambda t: t is str, StringKind),
]


def scalar_kind(target: Any) -> ScalarKind:
    """Resolve the capability object for a target type."""
    for matches, factory in _REGISTRY:
        if matches(target):
            return factory(target)
    if not callable(target):
        raise TypeError(f"Unsupported input target: {target!r}")
    return GenericKind(target)


__all__ = [
    "ScalarKind",
    "BooleanKind",
    "NumericKind",
    "StringKind",
    "EnumKind",
    "GenericKind",
    "NUMERIC_TYPES",
    "scalar_kind",
    "parse_index",
    "is_nan",
    "same_text",
]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Optional, Sequence, Tuple, TypeVar, Union

from .errors import InputRejected
from .scalars import EnumKind, ScalarKind, is_nan, scalar_kind

T = TypeVar("T")


@dataclass(frozen=True)
class AcquisitionRequest(Generic[T]):
    """Immutable description of one prompt."""

    target: Any
    message: Optional[str] = None
    is_range: bool = False
    allow_number_input: bool = True
    show_options: bool = True
    string_options: Optional[Tuple[str, ...]] = None
    enum_options: Optional[Tuple[Any, ...]] = None
    kind: ScalarKind = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.string_options is not None:
            object.__setattr__(self, "string_options", tuple(self.string_options))
        if self.enum_options is not None:
            object.__setattr__(self, "enum_options", tuple(self.enum_options))
        object.__setattr__(self, "kind", scalar_kind(self.target))


# ================================
# Value categories
# ================================

@dataclass(frozen=True)
class EnumRange:
    minimum: Any
    maximum: Any


@dataclass(frozen=True)
class NumericRange:
    minimum: Any
    maximum: Any


@dataclass(frozen=True)
class EnumOptions:
    options: Tuple[Any, ...]


@dataclass(frozen=True)
class StringOptions:
    options: Tuple[str, ...]


@dataclass(frozen=True)
class EnumMembers:
    pass


@dataclass(frozen=True)
class GenericScalar:
    pass


ValueCategory = Union[EnumRange, NumericRange, EnumOptions, StringOptions, EnumMembers, GenericScalar]


def _enum_range(request: AcquisitionRequest) -> Optional[EnumRange]:
    options = request.enum_options
    if not request.is_range or options is None or len(options) != 2:
        return None
    kind = request.kind
    if not isinstance(kind, EnumKind):
        return None
    if not all(kind.is_member(option) for option in options):
        return None
    return EnumRange(options[0], options[1])


def _numeric_range(request: AcquisitionRequest) -> Optional[NumericRange]:
    options = request.string_options
    if not request.is_range or options is None or len(options) != 2:
        return None
    kind = request.kind
    if not kind.is_numeric:
        return None
    try:
        minimum = kind.convert(options[0])
        maximum = kind.convert(options[1])
    except InputRejected:
        return None
    if is_nan(minimum) or is_nan(maximum):
        return None
    return NumericRange(minimum, maximum)


def _enum_options(request: AcquisitionRequest) -> Optional[EnumOptions]:
    if request.enum_options:
        return EnumOptions(request.enum_options)
    return None


def _string_options(request: AcquisitionRequest) -> Optional[StringOptions]:
    if request.string_options:
        return StringOptions(request.string_options)
    return None


def _enum_members(request: AcquisitionRequest) -> Optional[EnumMembers]:
    if request.kind.is_enum:
        return EnumMembers()
    return None


# Checked in order; the first match wins.
CLASSIFIERS: Sequence = (
    _enum_range,
    _numeric_range,
    _enum_options,
    _string_options,
    _enum_members,
)


def classify(request: AcquisitionRequest) -> ValueCategory:
    for classifier in CLASSIFIERS:
        category = classifier(request)
        if category is not None:
            return category
    return GenericScalar()


__all__ = [
    "AcquisitionRequest",
    "EnumRange",
    "NumericRange",
    "EnumOptions",
    "StringOptions",
    "EnumMembers",
    "GenericScalar",
    "ValueCategory",
    "CLASSIFIERS",
    "classify",
]

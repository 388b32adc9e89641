from __future__ import annotations


class InputRejected(ValueError):
    """Raised when a line of user input cannot be turned into a valid value."""


class BlankInputError(InputRejected):
    """The line was empty or whitespace only."""


class InputFormatError(InputRejected):
    """The text cannot be parsed as the target scalar type."""


class InputRangeError(InputRejected):
    """The text parses but falls outside the configured bounds."""


class NoMatchError(InputRejected):
    """The text matches no configured option or enumeration member."""


__all__ = [
    "InputRejected",
    "BlankInputError",
    "InputFormatError",
    "InputRangeError",
    "NoMatchError",
]

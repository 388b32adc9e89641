"""
Typed console input with validation and unbounded retry.

categories.py -- which validation strategy a request gets (range, options, enum, scalar)
scalars.py ----- per-type conversion capabilities
converters.py -- pure text -> Accepted/Rejected validation
presenter.py --- option listing shown before the first read
prompt.py ------ the read/validate/retry driver and get_input()
"""

from .categories import (
    AcquisitionRequest,
    EnumMembers,
    EnumOptions,
    EnumRange,
    GenericScalar,
    NumericRange,
    StringOptions,
    classify,
)
from .converters import Accepted, Rejected, convert
from .errors import BlankInputError, InputFormatError, InputRangeError, InputRejected, NoMatchError
from .presenter import present_options, render_options
from .prompt import PromptLoop, ScriptedSource, get_input
from .sinks import ConsoleSink, LineSink, RecordingSink

__all__ = [
    "AcquisitionRequest",
    "EnumMembers",
    "EnumOptions",
    "EnumRange",
    "GenericScalar",
    "NumericRange",
    "StringOptions",
    "classify",
    "Accepted",
    "Rejected",
    "convert",
    "BlankInputError",
    "InputFormatError",
    "InputRangeError",
    "InputRejected",
    "NoMatchError",
    "present_options",
    "render_options",
    "PromptLoop",
    "ScriptedSource",
    "get_input",
    "ConsoleSink",
    "LineSink",
    "RecordingSink",
]

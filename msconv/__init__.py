from .durations import DEFAULT_MAX_LENGTH, ms, parse_duration
from .errors import (
    DurationError,
    EmptyInputError,
    InvalidFormatError,
    InvalidNumberError,
    NotFiniteError,
    TooLongError,
    UnknownUnitError,
    UnsupportedInputTypeError,
)
from .formatting import format_duration
from .units import (
    DAY,
    HOUR,
    MILLISECOND,
    MINUTE,
    SECOND,
    UNIT_ALIASES,
    UNIT_MS,
    WEEK,
    YEAR,
)

__all__ = [
    "ms",
    "parse_duration",
    "format_duration",
    "DEFAULT_MAX_LENGTH",
    "DurationError",
    "EmptyInputError",
    "TooLongError",
    "InvalidFormatError",
    "InvalidNumberError",
    "UnknownUnitError",
    "NotFiniteError",
    "UnsupportedInputTypeError",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "YEAR",
    "UNIT_MS",
    "UNIT_ALIASES",
]

"""Utilities for parsing human-friendly duration strings."""

import logging
import math
import numbers
import re
from typing import Any, Union

from .errors import (
    EmptyInputError,
    InvalidFormatError,
    InvalidNumberError,
    TooLongError,
    UnknownUnitError,
    UnsupportedInputTypeError,
)
from .formatting import format_duration
from .units import UNIT_ALIASES, UNIT_MS

DEFAULT_MAX_LENGTH = 100

_DURATION_PATTERN = re.compile(
    r"(?P<number>-?\d*\.?\d+) ?(?P<unit>[a-z]+)?", re.IGNORECASE | re.ASCII
)

logger = logging.getLogger(__name__)


def parse_duration(value: str, max_length: int = DEFAULT_MAX_LENGTH) -> float:
    """Convert a duration expression into milliseconds.

    The expression is a number with an optional unit, separated by at most
    one space: ``"2h"``, ``"1.5 hours"``, ``"-.5d"``. Units are matched
    case-insensitively; when the unit is omitted the value is interpreted as
    milliseconds. Surrounding whitespace is ignored.

    Parameters
    ----------
    value:
        Duration expression to parse.
    max_length:
        Longest accepted expression, measured before trimming.

    Returns
    -------
    float
        The duration in milliseconds. The result is not rounded.

    Raises
    ------
    EmptyInputError
        If ``value`` is not a string or is empty.
    TooLongError
        If ``value`` is longer than ``max_length``.
    InvalidFormatError
        If the expression does not have the ``<number>[ ][unit]`` shape.
    InvalidNumberError
        If the number does not convert to a finite float.
    UnknownUnitError
        If the unit is not a recognised spelling.
    """

    if not isinstance(value, str) or not value:
        raise EmptyInputError(value)
    if len(value) > max_length:
        raise TooLongError(value, max_length)

    match = _DURATION_PATTERN.fullmatch(value.strip())
    if match is None:
        raise InvalidFormatError(value)

    literal = match.group("number")
    amount = float(literal)
    if not math.isfinite(amount):
        raise InvalidNumberError(literal)

    token = (match.group("unit") or "ms").lower()
    unit = UNIT_ALIASES.get(token)
    if unit is None:
        raise UnknownUnitError(token)

    result = amount * UNIT_MS[unit]
    logger.debug("parsed %r as %s %s -> %s ms", value, amount, unit, result)
    return result


def ms(
    value: Any, *, long: bool = False, max_length: int = DEFAULT_MAX_LENGTH
) -> Union[float, str]:
    """Parse ``value`` when it is a string, format it when it is a number.

    ``max_length`` only applies to parsing and ``long`` only to formatting.
    Numbers must be ``numbers.Real`` instances other than ``bool``;
    ``decimal.Decimal`` is not one and raises ``UnsupportedInputTypeError``.
    """
    if isinstance(value, str):
        return parse_duration(value, max_length=max_length)
    # bool is an int subclass but is not a duration
    if isinstance(value, numbers.Real) and not isinstance(value, bool):
        return format_duration(value, long=long)
    raise UnsupportedInputTypeError(value)

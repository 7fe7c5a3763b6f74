"""Render millisecond counts as short or long human-readable strings."""

import logging
import math
import numbers
from decimal import ROUND_HALF_UP, Decimal

from .errors import NotFiniteError
from .units import OUTPUT_UNITS

logger = logging.getLogger(__name__)


def _round(value: float) -> int:
    if value.is_integer():
        return int(value)
    # half away from zero, computed on the exact binary value
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _as_float(value) -> float:
    if not isinstance(value, numbers.Real) or isinstance(value, bool):
        raise NotFiniteError(value)
    try:
        result = float(value)
    except OverflowError:
        raise NotFiniteError(value) from None
    if not math.isfinite(result):
        raise NotFiniteError(value)
    return result


def format_duration(value: float, long: bool = False) -> str:
    """Format a millisecond count, e.g. ``7200000`` -> ``"2h"`` or ``"2 hours"``.

    The largest unit from days down to seconds whose size does not exceed the
    magnitude is used; anything under a second stays in milliseconds. In long
    form the unit name is pluralised once the magnitude reaches 1.5 units.
    """
    amount = _as_float(value)
    magnitude = abs(amount)

    for name, size, suffix in OUTPUT_UNITS:
        if magnitude >= size:
            count = _round(amount / size)
            if long:
                plural = "s" if magnitude >= size * 1.5 else ""
                text = f"{count} {name}{plural}"
            else:
                text = f"{count}{suffix}"
            break
    else:
        count = _round(amount)
        text = f"{count} ms" if long else f"{count}ms"

    logger.debug("formatted %s ms as %r", value, text)
    return text

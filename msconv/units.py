"""Unit constants shared by the parser and the formatter.

All multipliers are expressed in milliseconds. Years are approximated as
365.25 days.
"""

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

MILLISECOND = 1
SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24
WEEK = DAY * 7
YEAR = DAY * 365.25

UNIT_MS: Mapping[str, float] = MappingProxyType(
    {
        "millisecond": MILLISECOND,
        "second": SECOND,
        "minute": MINUTE,
        "hour": HOUR,
        "day": DAY,
        "week": WEEK,
        "year": YEAR,
    }
)

_SPELLINGS: Dict[str, Tuple[str, ...]] = {
    "millisecond": ("ms", "msec", "msecs", "millisecond", "milliseconds"),
    "second": ("s", "sec", "secs", "second", "seconds"),
    "minute": ("m", "min", "mins", "minute", "minutes"),
    "hour": ("h", "hr", "hrs", "hour", "hours"),
    "day": ("d", "day", "days"),
    "week": ("w", "week", "weeks"),
    "year": ("y", "yr", "yrs", "year", "years"),
}

# lower-case spelling -> canonical unit
UNIT_ALIASES: Mapping[str, str] = MappingProxyType(
    {alias: unit for unit, aliases in _SPELLINGS.items() for alias in aliases}
)

# (canonical unit, multiplier, short suffix), largest first.
# Weeks and years are accepted when parsing but never chosen for output.
OUTPUT_UNITS: Tuple[Tuple[str, int, str], ...] = (
    ("day", DAY, "d"),
    ("hour", HOUR, "h"),
    ("minute", MINUTE, "m"),
    ("second", SECOND, "s"),
)


def aliases_for(unit: str) -> Tuple[str, ...]:
    """Return every accepted spelling of ``unit``."""
    try:
        return _SPELLINGS[unit]
    except KeyError:
        raise KeyError(f"Unknown canonical unit: {unit}") from None

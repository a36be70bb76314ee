"""Guessing the field order of an ambiguous date string.

"2017-04-03" can only be year-month-day, but "03/04/2017" is a valid
day-month-year *and* month-day-year date. The bias decides ties: "DMY"
(e.g. AU/UK style) prefers day first, "MDY" (US style) month first.
"""

import calendar
import re
from datetime import MAXYEAR, MINYEAR, date
from typing import Literal, TypeAlias

from loguru import logger

from tempus.errors import NoValidFieldOrdering

Bias: TypeAlias = Literal["DMY", "MDY"]

# Layouts returned by the guesser
YMD = "%Y-%m-%d"
DMY = "%d/%m/%Y"
MDY = "%m/%d/%Y"

# layout -> positions of (year, month, day) in the split string
_POSITIONS: dict[str, tuple[int, int, int]] = {
    YMD: (0, 1, 2),
    DMY: (2, 1, 0),
    MDY: (2, 0, 1),
}

_PRIORITY: dict[Bias, tuple[str, ...]] = {
    "DMY": (YMD, DMY, MDY),
    "MDY": (YMD, MDY, DMY),
}

_SEPARATORS = re.compile(r"[ \-_/.,\\]")


def _fields(date_string: str) -> list[int] | None:
    parts = _SEPARATORS.split(date_string)
    if len(parts) != 3 or not all(part.isascii() and part.isdigit() for part in parts):
        return None
    return [int(part) for part in parts]


def _is_valid(year: int, month: int, day: int) -> bool:
    if not (MINYEAR <= year <= MAXYEAR and 1 <= month <= 12):
        return False
    return 1 <= day <= calendar.monthrange(year, month)[1]


def _normalize_bias(bias: str) -> Bias:
    return "MDY" if bias.upper() == "MDY" else "DMY"


def resolve_date_format(date_string: str, bias: str = "DMY") -> str:
    """
    Determine which field ordering makes ``date_string`` a valid date.

    Args:
        date_string: Three numeric fields separated by any of
            space, "-", "_", "/", ".", "," or backslash
        bias: "DMY" or "MDY" (case-insensitive); anything else means "DMY"

    Returns:
        One of YMD, DMY or MDY. Year-first is always tried first.

    Raises:
        NoValidFieldOrdering: If no ordering gives a real calendar date

    Example:
        >>> resolve_date_format("03/04/2017", "MDY")
        '%m/%d/%Y'
    """
    fields = _fields(date_string)
    if fields is not None:
        for layout in _PRIORITY[_normalize_bias(bias)]:
            y, m, d = (fields[i] for i in _POSITIONS[layout])
            if _is_valid(y, m, d):
                return layout
    raise NoValidFieldOrdering(date_string)


def guess_date_format(date_string: str, bias: str = "DMY") -> str | None:
    """Return the guessed layout of ``date_string``, or None."""
    try:
        return resolve_date_format(date_string, bias)
    except NoValidFieldOrdering as exc:
        logger.debug("{}", exc)
        return None


def guess_date(date_string: str, bias: str = "DMY") -> date | None:
    """Parse ``date_string`` using its guessed layout."""
    layout = guess_date_format(date_string, bias)
    fields = _fields(date_string)
    if layout is None or fields is None:
        return None
    y, m, d = (fields[i] for i in _POSITIONS[layout])
    return date(y, m, d)

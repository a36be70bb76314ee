"""Calendar unit rolling and arithmetic.

Rolling moves an instant to the first or last second of the unit that
contains it. Shifting adds or subtracts whole units. Both return new
``datetime`` values; nothing is mutated in place.
"""

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta

from dateutil.relativedelta import relativedelta

from tempus.util import Unit

# Caller-facing week start index (0=Sunday ... 6=Saturday) to Python weekday
_FIRST_DAY_MAP = {
    0: calendar.SUNDAY,
    1: calendar.MONDAY,
    2: calendar.TUESDAY,
    3: calendar.WEDNESDAY,
    4: calendar.THURSDAY,
    5: calendar.FRIDAY,
    6: calendar.SATURDAY,
}


@dataclass(frozen=True)
class WeekConvention:
    """First and last day of a week, as Python weekdays (Monday=0)."""

    start_day: int
    end_day: int

    @classmethod
    def from_first_day(cls, first_day_of_week: int = 0) -> "WeekConvention":
        """Build a convention from a 0=Sunday ... 6=Saturday index.

        The week ends on the day before it starts. Unknown indices fall back
        to a Sunday-Saturday week.
        """
        start = _FIRST_DAY_MAP.get(first_day_of_week, calendar.SUNDAY)
        return cls(start_day=start, end_day=(start - 1) % 7)

    def __str__(self) -> str:
        return (
            f"WeekConvention({calendar.day_name[self.start_day]}"
            f"→{calendar.day_name[self.end_day]})"
        )


SUNDAY_WEEK = WeekConvention.from_first_day(0)


def quarter_of(dt: datetime) -> int:
    """Return the 1-indexed quarter (Q1 = Jan-Mar ... Q4 = Oct-Dec)."""
    return (dt.month - 1) // 3 + 1


def _days_in_month(dt: datetime) -> int:
    return calendar.monthrange(dt.year, dt.month)[1]


def _start_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=0, minute=0, second=0, microsecond=0)


def _end_of_day(dt: datetime) -> datetime:
    return dt.replace(hour=23, minute=59, second=59, microsecond=0)


def _start_of_month(dt: datetime) -> datetime:
    return _start_of_day(dt.replace(day=1))


def _end_of_month(dt: datetime) -> datetime:
    return _end_of_day(dt.replace(day=_days_in_month(dt)))


def _start_of_week(dt: datetime, week: WeekConvention) -> datetime:
    back = (dt.weekday() - week.start_day) % 7
    return _start_of_day(dt - timedelta(days=back))


def _end_of_week(dt: datetime, week: WeekConvention) -> datetime:
    ahead = (week.end_day - dt.weekday()) % 7
    return _end_of_day(dt + timedelta(days=ahead))


def _start_of_quarter(dt: datetime) -> datetime:
    return _start_of_month(dt.replace(day=1, month=quarter_of(dt) * 3 - 2))


def _end_of_quarter(dt: datetime) -> datetime:
    return _end_of_month(dt.replace(day=1, month=quarter_of(dt) * 3))


_Roll = Callable[[datetime, WeekConvention], datetime]

_START_OF: dict[Unit, _Roll] = {
    # Seconds are the pipeline's resolution, so rolling is an identity
    "second": lambda dt, _: dt.replace(microsecond=0),
    "minute": lambda dt, _: dt.replace(second=0, microsecond=0),
    "hour": lambda dt, _: dt.replace(minute=0, second=0, microsecond=0),
    "day": lambda dt, _: _start_of_day(dt),
    "week": _start_of_week,
    "month": lambda dt, _: _start_of_month(dt),
    "quarter": lambda dt, _: _start_of_quarter(dt),
    "year": lambda dt, _: _start_of_month(dt.replace(month=1, day=1)),
}

_END_OF: dict[Unit, _Roll] = {
    "second": lambda dt, _: dt.replace(microsecond=0),
    "minute": lambda dt, _: dt.replace(second=59, microsecond=0),
    "hour": lambda dt, _: dt.replace(minute=59, second=59, microsecond=0),
    "day": lambda dt, _: _end_of_day(dt),
    "week": _end_of_week,
    "month": lambda dt, _: _end_of_month(dt),
    "quarter": lambda dt, _: _end_of_quarter(dt),
    "year": lambda dt, _: _end_of_month(dt.replace(month=12, day=1)),
}

_STEP: dict[Unit, Callable[[int], relativedelta]] = {
    "second": lambda n: relativedelta(seconds=n),
    "minute": lambda n: relativedelta(minutes=n),
    "hour": lambda n: relativedelta(hours=n),
    "day": lambda n: relativedelta(days=n),
    "week": lambda n: relativedelta(weeks=n),
    "month": lambda n: relativedelta(months=n),
    "quarter": lambda n: relativedelta(months=3 * n),
    "year": lambda n: relativedelta(years=n),
}


def start_of(dt: datetime, unit: Unit, week: WeekConvention = SUNDAY_WEEK) -> datetime:
    """Roll ``dt`` back to the first second of its ``unit``."""
    return _START_OF[unit](dt, week)


def end_of(dt: datetime, unit: Unit, week: WeekConvention = SUNDAY_WEEK) -> datetime:
    """Roll ``dt`` forward to the last second of its ``unit``."""
    return _END_OF[unit](dt, week)


def shift(dt: datetime, unit: Unit, amount: int) -> datetime:
    """Move ``dt`` by ``amount`` units (negative moves backward).

    Month, quarter and year shifts clamp the day to the target month's
    length, so Jan 31 + 1 month is Feb 28/29.
    """
    return dt + _STEP[unit](amount)

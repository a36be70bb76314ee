"""Turning phrases into concrete time ranges.

Examples of accepted input::

    now / today / tomorrow / yesterday
    last month / next year / this quarter
    2016 / 2016-02-10 / 2016-02-10 08:30:00 / 08:30:00 / 1700000000
    last 365 days / next 3 weeks

and any two of the above joined by " to "::

    last week to next week
    last month to now
    last 300 days to last 10 days
"""

from datetime import datetime
from zoneinfo import ZoneInfo

from loguru import logger

from tempus.errors import DateOutOfRange, MalformedRangeSyntax, TimeRangeError
from tempus.expressions import Expression, StaticParser, resolve_expression
from tempus.interval import TimeRange
from tempus.normalize import normalize
from tempus.rolling import SUNDAY_WEEK, WeekConvention, end_of, shift, start_of
from tempus.util import BASE_FORMAT, MODIFIERS, RANGE_DELIMITER, Boundary


def _current_instant(now: datetime | None, zone: ZoneInfo) -> datetime:
    if now is None:
        return datetime.now(zone)
    if now.tzinfo is None:
        raise TypeError(
            f"now must be a timezone-aware datetime.\n"
            f"Got naive datetime: {now!r}\n"
            f"Hint: Add timezone info:\n"
            f"  from zoneinfo import ZoneInfo\n"
            f"  now = datetime(..., tzinfo=ZoneInfo('UTC'))"
        )
    return now.astimezone(zone)


def _leading_modifier(text: str) -> str | None:
    """Return "last"/"next" when the normalized phrase starts with one."""
    head = text.split(" ", 1)[0]
    return head if head in MODIFIERS else None


def resolve_expressions(text: str, now: datetime) -> tuple[Expression, Expression]:
    """Classify the start and end expressions of ``text``.

    A single relative phrase is expanded into an open range anchored at
    "now": "next 3 weeks" runs from now to the end of the third week ahead,
    "last 3 days" from the start of the third day back until now.
    """
    parts = [part.strip() for part in normalize(text).split(RANGE_DELIMITER)]

    if len(parts) == 1:
        expression = resolve_expression(parts[0], now)
        if expression.kind != "dynamic":
            return expression, expression

        now_expression = StaticParser().parse("now", now)
        assert now_expression is not None
        modifier = _leading_modifier(parts[0])
        if modifier == "next":
            return now_expression, expression
        if modifier == "last":
            return expression, now_expression
        return expression, expression

    if len(parts) == 2:
        return resolve_expression(parts[0], now), resolve_expression(parts[1], now)

    raise MalformedRangeSyntax(text, len(parts))


def _round_trip(dt: datetime) -> datetime:
    # Zero-padded by hand: strftime("%Y") does not pad years below 1000
    text = (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )
    return datetime.strptime(text, BASE_FORMAT).replace(tzinfo=dt.tzinfo)


def materialize(
    expression: Expression, boundary: Boundary, week: WeekConvention = SUNDAY_WEEK
) -> datetime:
    """Turn one expression into the start or end instant of a range.

    The base is rolled to the boundary of its unit and then shifted by the
    offset. The shifted value is rolled once more so that month-length
    clamping (end of June minus a quarter is March 30) cannot leave an end
    boundary short of the month's last day.

    Raises:
        DateOutOfRange: If rolling or shifting leaves the years
            ``datetime`` can represent
    """
    roll = start_of if boundary == "start" else end_of
    amount = expression.offset if expression.direction == "forward" else -expression.offset

    try:
        rolled = roll(_round_trip(expression.base), expression.unit, week)
        shifted = shift(rolled, expression.unit, amount)
        return roll(shifted, expression.unit, week)
    except (ValueError, OverflowError) as exc:
        raise DateOutOfRange(expression.expression) from exc


def resolve_time_range(
    text: str,
    first_day_of_week: int = 0,
    *,
    tz: str = "UTC",
    now: datetime | None = None,
) -> TimeRange:
    """
    Convert a phrase into a concrete time range.

    Args:
        text: Phrase such as "last month", "next 3 weeks", "2016" or
            "last 300 days to last 10 days"
        first_day_of_week: 0=Sunday (default) ... 6=Saturday; the week ends
            the day before it starts. Other values mean Sunday.
        tz: IANA timezone name used for "now" and for timestamps
        now: Timezone-aware instant to resolve relative phrases against
            (defaults to the current time in ``tz``)

    Returns:
        TimeRange with second-resolution start and end

    Raises:
        TimeRangeError: One of its subclasses, describing why ``text`` could
            not be resolved

    Example:
        >>> from datetime import datetime, timezone
        >>> now = datetime(2024, 5, 15, 13, 45, 30, tzinfo=timezone.utc)
        >>> rng = resolve_time_range("last month to now", now=now)
        >>> str(rng.start), str(rng.end)
        ('2024-04-01 00:00:00+00:00', '2024-05-15 13:45:30+00:00')
    """
    zone = ZoneInfo(tz)
    current = _current_instant(now, zone)
    week = WeekConvention.from_first_day(first_day_of_week)

    start, end = resolve_expressions(text, current)
    time_range = TimeRange(
        start=materialize(start, "start", week),
        end=materialize(end, "end", week),
    )
    logger.debug("Resolved {!r} to {} ({})", text, time_range, week)
    return time_range


def parse_time_range(
    text: str,
    first_day_of_week: int = 0,
    *,
    tz: str = "UTC",
    now: datetime | None = None,
) -> TimeRange | None:
    """Like ``resolve_time_range`` but return None when ``text`` is not understood."""
    try:
        return resolve_time_range(text, first_day_of_week, tz=tz, now=now)
    except TimeRangeError as exc:
        logger.debug("Could not resolve {!r}: {}", text, exc)
        return None

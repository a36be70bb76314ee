"""Failure kinds raised while resolving phrases and guessing date layouts.

Every error is a ``ValueError`` so callers that only care about "did it
parse" can catch one type. The ``parse_*``/``guess_*`` entry points turn
these into ``None``; the ``resolve_*`` variants let them propagate.
"""

from datetime import MAXYEAR, MINYEAR


class TimeRangeError(ValueError):
    """Base class for every tempus resolution failure."""

    def __init__(self, text: str, message: str):
        self.text: str = text
        super().__init__(message)


class MalformedRangeSyntax(TimeRangeError):
    def __init__(self, text: str, parts: int):
        self.parts: int = parts
        super().__init__(
            text,
            f"Expected one phrase or two phrases joined by ' to ', "
            f"got {parts} parts in {text!r}.\n"
            f"Examples: 'last month', 'last month to now'",
        )


class UnrecognizedExpression(TimeRangeError):
    def __init__(self, text: str):
        super().__init__(
            text,
            f"Could not interpret {text!r} as a time expression.\n"
            f"Accepted: fixed phrases ('today', 'last week'), "
            f"'<last|next> <n> <unit>', 'YYYY', 'YYYY-MM-DD', "
            f"'YYYY-MM-DD HH:MM:SS', 'HH:MM:SS' or a Unix timestamp",
        )


class UnknownModifier(TimeRangeError):
    def __init__(self, text: str, modifier: str):
        self.modifier: str = modifier
        super().__init__(
            text,
            f"Unknown modifier {modifier!r} in {text!r}.\n"
            f"Relative phrases start with 'last' or 'next', e.g. 'next 3 weeks'",
        )


class InvalidDynamicOffset(TimeRangeError):
    def __init__(self, text: str, offset: str):
        self.offset: str = offset
        super().__init__(
            text,
            f"Offset {offset!r} in {text!r} must be a positive whole number.\n"
            f"Example: 'last 10 days'",
        )


class UnknownUnit(TimeRangeError):
    def __init__(self, text: str, unit: str):
        self.unit: str = unit
        super().__init__(
            text,
            f"Unknown unit {unit!r} in {text!r}.\n"
            f"Valid units: second, minute, hour, day, week, month, quarter, year",
        )


class DateBeforeSupportedEpoch(TimeRangeError):
    def __init__(self, text: str, cutoff: int):
        self.cutoff: int = cutoff
        super().__init__(
            text,
            f"{text!r} is below {cutoff} and is not treated as a year",
        )


class NoValidFieldOrdering(TimeRangeError):
    def __init__(self, text: str):
        super().__init__(
            text,
            f"No year/month/day ordering of {text!r} forms a valid calendar date",
        )


class DateOutOfRange(TimeRangeError):
    def __init__(self, text: str):
        super().__init__(
            text,
            f"{text!r} lands outside the representable years "
            f"{MINYEAR}..{MAXYEAR}",
        )

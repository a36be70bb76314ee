"""Classification of a single phrase into an expression.

A phrase is tried against four parsers in a fixed order and the first one
that recognizes it wins:

1. static phrases from a lookup table ("today", "last week", ...)
2. dynamic phrases of the form ``<last|next> <n> <unit>``
3. explicit dates/times in one of a few fixed layouts ("2016", "2016-02-10")
4. integer Unix timestamps

Static and dynamic expressions are anchored at "now"; format and timestamp
expressions are anchored at the instant they spell out.
"""

import calendar
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import override

from loguru import logger

from tempus.errors import (
    DateBeforeSupportedEpoch,
    InvalidDynamicOffset,
    TimeRangeError,
    UnknownModifier,
    UnknownUnit,
    UnrecognizedExpression,
)
from tempus.normalize import normalize
from tempus.util import EPOCH_CUTOFF, MODIFIERS, UNITS, Direction, Kind, Unit

_INTEGER = re.compile(r"-?[0-9]+")
_DIGITS = re.compile(r"[0-9]+")


@dataclass(frozen=True, kw_only=True)
class Expression:
    """One classified endpoint of a time range.

    ``base`` is the instant arithmetic starts from; ``unit`` is what the
    base gets rolled to, and ``offset`` units are then added or subtracted
    according to ``direction``.
    """

    expression: str
    kind: Kind
    unit: Unit
    offset: int
    direction: Direction
    base: datetime

    def __str__(self) -> str:
        sign = "+" if self.direction == "forward" else "-"
        return (
            f"Expression({self.kind} {self.expression!r}: "
            f"{self.base:%Y-%m-%d %H:%M:%S} {sign}{self.offset} {self.unit})"
        )


class ExpressionParser(ABC):
    """Recognizes one kind of expression.

    ``parse`` returns None when the text is not this kind of expression and
    raises a ``TimeRangeError`` when it has the right shape but bad content.
    """

    @abstractmethod
    def parse(self, text: str, now: datetime) -> Expression | None:
        pass


# phrase -> (unit, offset, direction)
_STATIC_PHRASES: dict[str, tuple[Unit, int, Direction]] = {
    # years
    "last year": ("year", 1, "backward"),
    "this year": ("year", 0, "forward"),
    "next year": ("year", 1, "forward"),
    # quarters
    "last quarter": ("quarter", 1, "backward"),
    "this quarter": ("quarter", 0, "forward"),
    "next quarter": ("quarter", 1, "forward"),
    # months
    "last month": ("month", 1, "backward"),
    "this month": ("month", 0, "forward"),
    "next month": ("month", 1, "forward"),
    # weeks
    "last week": ("week", 1, "backward"),
    "this week": ("week", 0, "forward"),
    "next week": ("week", 1, "forward"),
    # days
    "day before yesterday": ("day", 2, "backward"),
    "yesterday": ("day", 1, "backward"),
    "today": ("day", 0, "forward"),
    "tomorrow": ("day", 1, "forward"),
    "day after tomorrow": ("day", 2, "forward"),
    # hours
    "last hour": ("hour", 1, "backward"),
    "this hour": ("hour", 0, "forward"),
    "next hour": ("hour", 1, "forward"),
    # minutes
    "last minute": ("minute", 1, "backward"),
    "this minute": ("minute", 0, "forward"),
    "next minute": ("minute", 1, "forward"),
    # seconds
    "now": ("second", 0, "forward"),
}

_STATIC_TABLE: dict[str, tuple[Unit, int, Direction]] = {
    spelling: values
    for phrase, values in _STATIC_PHRASES.items()
    for spelling in (phrase, phrase.replace(" ", "-"), phrase.replace(" ", "_"))
}


def static_phrases() -> list[str]:
    """Return every accepted static spelling (space, dash and underscore)."""
    return sorted(_STATIC_TABLE)


class StaticParser(ExpressionParser):
    @override
    def parse(self, text: str, now: datetime) -> Expression | None:
        if text not in _STATIC_TABLE:
            return None
        unit, offset, direction = _STATIC_TABLE[text]
        return Expression(
            expression=text,
            kind="static",
            unit=unit,
            offset=offset,
            direction=direction,
            base=now,
        )


class DynamicParser(ExpressionParser):
    """``<last|next> <n> <unit>``, e.g. "last 3 day" or "next 10 week"."""

    @override
    def parse(self, text: str, now: datetime) -> Expression | None:
        parts = text.split(" ")
        if len(parts) != 3:
            return None
        modifier, offset, unit = parts

        # Only report problems for text that looks like a relative phrase
        if modifier not in MODIFIERS and unit not in UNITS:
            return None
        if modifier not in MODIFIERS:
            raise UnknownModifier(text, modifier)
        if not _DIGITS.fullmatch(offset) or int(offset) == 0:
            raise InvalidDynamicOffset(text, offset)
        if unit not in UNITS:
            raise UnknownUnit(text, unit)

        return Expression(
            expression=text,
            kind="dynamic",
            unit=unit,  # pyright: ignore[reportArgumentType]
            offset=int(offset),
            direction=MODIFIERS[modifier],
            base=now,
        )


_FIELDS = ("year", "month", "day", "hour", "minute", "second")


@dataclass(frozen=True)
class FormatPattern:
    """A fixed textual layout and the unit an expression in it rounds to.

    ``carries`` lists the fields the layout spells out; the rest are taken
    from "now" when the pattern is filled in.
    """

    name: str
    pattern: str
    unit: Unit
    carries: frozenset[str]

    def fill(self, parsed: datetime, now: datetime) -> datetime:
        fields = {
            name: getattr(parsed if name in self.carries else now, name)
            for name in _FIELDS
        }
        last_day = calendar.monthrange(fields["year"], fields["month"])[1]
        fields["day"] = min(fields["day"], last_day)
        return datetime(**fields, tzinfo=now.tzinfo)


FORMAT_PATTERNS: tuple[FormatPattern, ...] = (
    FormatPattern("year", "%Y", "year", frozenset({"year"})),
    FormatPattern(
        "year-month-day", "%Y-%m-%d", "day", frozenset({"year", "month", "day"})
    ),
    FormatPattern(
        "year-month-day hour:minute:second",
        "%Y-%m-%d %H:%M:%S",
        "second",
        frozenset(_FIELDS),
    ),
    FormatPattern(
        "hour:minute:second",
        "%H:%M:%S",
        "second",
        frozenset({"hour", "minute", "second"}),
    ),
)


class FormatParser(ExpressionParser):
    @override
    def parse(self, text: str, now: datetime) -> Expression | None:
        if _INTEGER.fullmatch(text) and int(text) < EPOCH_CUTOFF:
            raise DateBeforeSupportedEpoch(text, EPOCH_CUTOFF)

        for fmt in FORMAT_PATTERNS:
            try:
                parsed = datetime.strptime(text, fmt.pattern)
            except ValueError:
                continue
            return Expression(
                expression=text,
                kind="format",
                unit=fmt.unit,
                offset=0,
                direction="forward",
                base=fmt.fill(parsed, now),
            )
        return None


class TimestampParser(ExpressionParser):
    """Canonical decimal integers read as Unix epoch seconds."""

    @override
    def parse(self, text: str, now: datetime) -> Expression | None:
        if not _INTEGER.fullmatch(text) or str(int(text)) != text:
            return None
        try:
            base = datetime.fromtimestamp(int(text), tz=now.tzinfo)
        except (OverflowError, OSError, ValueError):
            return None
        return Expression(
            expression=text,
            kind="timestamp",
            unit="second",
            offset=0,
            direction="forward",
            base=base,
        )


PARSERS: tuple[ExpressionParser, ...] = (
    StaticParser(),
    DynamicParser(),
    FormatParser(),
    TimestampParser(),
)


def resolve_expression(text: str, now: datetime) -> Expression:
    """Classify ``text`` or raise the most specific failure.

    If a parser rejects the text but a later one accepts it, the rejection
    is dropped: "1500" is not a year, but it is a timestamp.
    """
    text = normalize(text).strip()
    first_error: TimeRangeError | None = None

    for parser in PARSERS:
        try:
            expression = parser.parse(text, now)
        except TimeRangeError as exc:
            logger.debug("{} rejected {!r}: {}", type(parser).__name__, text, exc)
            if first_error is None:
                first_error = exc
            continue
        if expression is not None:
            logger.debug("Classified {!r} as {}", text, expression)
            return expression

    if first_error is not None:
        raise first_error
    raise UnrecognizedExpression(text)


def classify(text: str, now: datetime) -> Expression | None:
    """Classify ``text`` into an expression, or return None."""
    try:
        return resolve_expression(text, now)
    except TimeRangeError:
        return None

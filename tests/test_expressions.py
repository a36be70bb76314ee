"""Tests for phrase classification."""

from dataclasses import replace
from datetime import datetime, timezone

import pytest

from tempus import (
    FORMAT_PATTERNS,
    DateBeforeSupportedEpoch,
    InvalidDynamicOffset,
    UnknownModifier,
    UnknownUnit,
    UnrecognizedExpression,
    classify,
    resolve_expression,
    static_phrases,
)
from tempus.expressions import DynamicParser, FormatParser, StaticParser, TimestampParser

NOW = datetime(2024, 5, 15, 13, 45, 30, tzinfo=timezone.utc)


def test_static_phrase_table():
    expr = classify("last week", NOW)
    assert expr is not None
    assert (expr.kind, expr.unit, expr.offset, expr.direction) == (
        "static",
        "week",
        1,
        "backward",
    )
    assert expr.base == NOW


@pytest.mark.parametrize(
    "phrase,unit,offset,direction",
    [
        ("now", "second", 0, "forward"),
        ("today", "day", 0, "forward"),
        ("yesterday", "day", 1, "backward"),
        ("tomorrow", "day", 1, "forward"),
        ("day before yesterday", "day", 2, "backward"),
        ("day after tomorrow", "day", 2, "forward"),
        ("this year", "year", 0, "forward"),
        ("next quarter", "quarter", 1, "forward"),
        ("last minute", "minute", 1, "backward"),
        ("this hour", "hour", 0, "forward"),
    ],
)
def test_static_phrase_values(phrase, unit, offset, direction):
    expr = StaticParser().parse(phrase, NOW)
    assert expr is not None
    assert (expr.unit, expr.offset, expr.direction) == (unit, offset, direction)


def test_static_phrases_have_dash_and_underscore_spellings():
    phrases = static_phrases()
    assert len(phrases) == len(set(phrases))
    for phrase in ["last week", "day after tomorrow", "this quarter"]:
        assert phrase in phrases
        assert phrase.replace(" ", "-") in phrases
        assert phrase.replace(" ", "_") in phrases

    plain = classify("day before yesterday", NOW)
    assert plain is not None
    for spelling in ["day-before-yesterday", "day_before_yesterday"]:
        assert classify(spelling, NOW) == replace(plain, expression=spelling)


def test_static_lookup_is_case_and_synonym_insensitive():
    expr = classify("Previous_Month", NOW)
    assert expr is not None
    assert expr.expression == "last_month"
    assert expr.unit == "month"


def test_dynamic_expression():
    expr = classify("next 3 weeks", NOW)
    assert expr is not None
    assert (expr.kind, expr.unit, expr.offset, expr.direction) == (
        "dynamic",
        "week",
        3,
        "forward",
    )
    assert expr.base == NOW


def test_dynamic_parser_ignores_other_shapes():
    parser = DynamicParser()
    assert parser.parse("last week", NOW) is None
    assert parser.parse("foo bar baz", NOW) is None
    assert parser.parse("last  3 day", NOW) is None


@pytest.mark.parametrize(
    "text",
    ["last 0 day", "next 00 week", "last -3 day", "next 1.5 hour", "last three day"],
)
def test_dynamic_offset_must_be_positive_integer(text):
    with pytest.raises(InvalidDynamicOffset):
        DynamicParser().parse(text, NOW)


def test_dynamic_unknown_unit_and_modifier():
    with pytest.raises(UnknownUnit) as unit_error:
        DynamicParser().parse("last 3 fortnight", NOW)
    assert unit_error.value.unit == "fortnight"

    with pytest.raises(UnknownModifier) as modifier_error:
        DynamicParser().parse("this 3 day", NOW)
    assert modifier_error.value.modifier == "this"


def test_cascade_reports_specific_dynamic_failure():
    with pytest.raises(InvalidDynamicOffset):
        resolve_expression("last 0 days", NOW)
    with pytest.raises(UnknownUnit):
        resolve_expression("next 2 fortnights", NOW)
    assert classify("last 0 days", NOW) is None


def test_format_year():
    expr = classify("2016", NOW)
    assert expr is not None
    assert (expr.kind, expr.unit, expr.offset, expr.direction) == (
        "format",
        "year",
        0,
        "forward",
    )
    # A bare year keeps the rest of "now"
    assert expr.base == datetime(2016, 5, 15, 13, 45, 30, tzinfo=timezone.utc)


def test_format_year_clamps_leap_day():
    leap_day = datetime(2024, 2, 29, 8, 0, 0, tzinfo=timezone.utc)
    expr = classify("2023", leap_day)
    assert expr is not None
    assert expr.base == datetime(2023, 2, 28, 8, 0, 0, tzinfo=timezone.utc)


def test_format_date_and_datetime_and_time():
    day = classify("2016-02-10", NOW)
    assert day is not None
    assert day.unit == "day"
    assert day.base == datetime(2016, 2, 10, 13, 45, 30, tzinfo=timezone.utc)

    full = classify("2016-02-10 08:09:10", NOW)
    assert full is not None
    assert full.unit == "second"
    assert full.base == datetime(2016, 2, 10, 8, 9, 10, tzinfo=timezone.utc)

    time_only = classify("08:09:10", NOW)
    assert time_only is not None
    assert time_only.unit == "second"
    assert time_only.base == datetime(2024, 5, 15, 8, 9, 10, tzinfo=timezone.utc)


def test_format_patterns_order():
    assert [fmt.name for fmt in FORMAT_PATTERNS] == [
        "year",
        "year-month-day",
        "year-month-day hour:minute:second",
        "hour:minute:second",
    ]


def test_format_rejects_small_integers():
    with pytest.raises(DateBeforeSupportedEpoch) as error:
        FormatParser().parse("1500", NOW)
    assert error.value.cutoff == 1753
    assert FormatParser().parse("1753", NOW) is not None


def test_format_rejects_impossible_dates():
    assert FormatParser().parse("2017-02-31", NOW) is None
    assert classify("2017-02-31", NOW) is None


def test_small_integer_falls_through_to_timestamp():
    expr = classify("1500", NOW)
    assert expr is not None
    assert expr.kind == "timestamp"
    assert expr.base == datetime(1970, 1, 1, 0, 25, 0, tzinfo=timezone.utc)


def test_timestamp_expression():
    expr = classify("1700000000", NOW)
    assert expr is not None
    assert (expr.kind, expr.unit, expr.offset, expr.direction) == (
        "timestamp",
        "second",
        0,
        "forward",
    )
    assert expr.base == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


def test_timestamp_requires_canonical_integer():
    parser = TimestampParser()
    assert parser.parse("0", NOW) is not None
    assert parser.parse("-60", NOW) is not None
    assert parser.parse("007", NOW) is None
    assert parser.parse("1_000", NOW) is None
    assert parser.parse("12.5", NOW) is None
    assert parser.parse("10" * 20, NOW) is None


def test_leading_zero_small_integer_reports_epoch_cutoff():
    with pytest.raises(DateBeforeSupportedEpoch):
        resolve_expression("0999", NOW)


@pytest.mark.parametrize("text", ["", "someday", "last fortnight", "2016/02/10"])
def test_unrecognized_expression(text):
    with pytest.raises(UnrecognizedExpression):
        resolve_expression(text, NOW)
    assert classify(text, NOW) is None

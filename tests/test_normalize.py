"""Tests for synonym canonicalization."""

import pytest

from tempus import normalize


@pytest.mark.parametrize(
    "text,expected",
    [
        ("Last Month", "last month"),
        ("previous 3 days", "last 3 day"),
        ("past 2 weeks", "last 2 week"),
        ("current quarter", "this quarter"),
        ("present year", "this year"),
        ("forward 4 hours", "next 4 hour"),
        ("future 10 minutes", "next 10 minute"),
        ("next 30 mins", "next 30 minute"),
        ("last 90 secs", "last 90 second"),
        ("last 90 seconds", "last 90 second"),
        ("next 2 months", "next 2 month"),
        ("last 5 years", "last 5 year"),
        ("next 2 quarters", "next 2 quarter"),
    ],
)
def test_synonyms_are_canonicalized(text, expected):
    assert normalize(text) == expected


def test_dash_and_underscore_separate_tokens():
    assert normalize("Past-Week") == "last-week"
    assert normalize("previous_month") == "last_month"
    assert normalize("day_after_tomorrow") == "day_after_tomorrow"


def test_words_containing_a_synonym_are_untouched():
    # Substitution only rewrites whole tokens
    assert normalize("mondays") == "mondays"
    assert normalize("holidays") == "holidays"
    assert normalize("pasta") == "pasta"
    assert normalize("presentation") == "presentation"


def test_normalize_is_idempotent():
    for text in ["previous 3 days", "past_week to future 2 months", "now"]:
        once = normalize(text)
        assert normalize(once) == once


def test_range_delimiter_survives():
    assert normalize("Previous Month TO Now") == "last month to now"

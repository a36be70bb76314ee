"""Tests for date layout guessing."""

from datetime import date

import pytest

from tempus import (
    DMY,
    MDY,
    YMD,
    NoValidFieldOrdering,
    guess_date,
    guess_date_format,
    resolve_date_format,
)


def test_year_first_wins_regardless_of_bias():
    assert guess_date_format("2017-04-03", "DMY") == YMD
    assert guess_date_format("2017-04-03", "MDY") == YMD


def test_bias_breaks_ties():
    assert guess_date_format("03/04/2017", "DMY") == DMY
    assert guess_date_format("03/04/2017", "MDY") == MDY


def test_default_bias_is_dmy():
    assert guess_date_format("03/04/2017") == DMY


def test_bias_is_case_insensitive_and_unknown_means_dmy():
    assert guess_date_format("03/04/2017", "mdy") == MDY
    assert guess_date_format("03/04/2017", "YMD") == DMY
    assert guess_date_format("03/04/2017", "") == DMY


def test_falls_back_when_preferred_order_is_invalid():
    assert guess_date_format("25/12/2017", "MDY") == DMY
    assert guess_date_format("12/25/2017", "DMY") == MDY


@pytest.mark.parametrize("bias", ["DMY", "MDY"])
@pytest.mark.parametrize(
    "text", ["31/02/2017", "13/25/2017", "2017-04", "2017-04-03-01", "ab/cd/2017", ""]
)
def test_no_valid_ordering(text, bias):
    assert guess_date_format(text, bias) is None
    with pytest.raises(NoValidFieldOrdering):
        resolve_date_format(text, bias)


@pytest.mark.parametrize(
    "text",
    [
        "29 02 2016",
        "29-02-2016",
        "29_02_2016",
        "29/02/2016",
        "29.02.2016",
        "29,02,2016",
        "29\\02\\2016",
    ],
)
def test_separators(text):
    assert guess_date_format(text) == DMY


def test_leap_years():
    assert guess_date_format("29/02/2016") == DMY
    assert guess_date_format("29/02/2017") is None
    assert guess_date_format("2000-02-29") == YMD
    assert guess_date_format("1900-02-29") is None


def test_empty_fields_are_rejected():
    assert guess_date_format("2017//04") is None
    assert guess_date_format("2017- 04-03") is None


def test_guess_date():
    assert guess_date("03/04/2017") == date(2017, 4, 3)
    assert guess_date("03/04/2017", "MDY") == date(2017, 3, 4)
    assert guess_date("2017.12.25") == date(2017, 12, 25)
    assert guess_date("31/02/2017") is None

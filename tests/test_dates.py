"""Unit tests for helperkit.utils.dates."""

from datetime import datetime, timedelta, timezone

import pytest

from helperkit.utils.dates import (
    DATE_ERROR_MESSAGE,
    beginning_of_day,
    days_in,
    end_of_day,
    format_date_with_suffix,
    get_days_in_month,
    get_month_from_name,
    parse_date,
    properly_format_date,
)


def test_parse_date_variants():
    assert parse_date("2024-03-15") == datetime(2024, 3, 15)
    assert parse_date("March 15, 2024") == datetime(2024, 3, 15)

    existing = datetime(2020, 1, 1, 12, 30)
    assert parse_date(existing) is existing


@pytest.mark.parametrize("value", [None, 12345, "definitely not a date"])
def test_parse_date_failures_return_none(value):
    assert parse_date(value) is None


def test_properly_format_date():
    assert properly_format_date("2006-01-02") == "January 2 2006"
    assert properly_format_date("2024-11-30") == "November 30 2024"


def test_properly_format_date_records_error_and_raises():
    errors = {}
    with pytest.raises(ValueError):
        properly_format_date("2024-13-01", errors)

    assert errors == {"Err": DATE_ERROR_MESSAGE}


def test_properly_format_date_without_error_mapping():
    with pytest.raises(ValueError):
        properly_format_date("02/01/2006")


@pytest.mark.parametrize(
    "day, expected",
    [
        (1, "January 1st, 2024"),
        (2, "January 2nd, 2024"),
        (3, "January 3rd, 2024"),
        (4, "January 4th, 2024"),
        (11, "January 11th, 2024"),
        (12, "January 12th, 2024"),
        (13, "January 13th, 2024"),
        (21, "January 21st, 2024"),
        (22, "January 22nd, 2024"),
        (23, "January 23rd, 2024"),
        (30, "January 30th, 2024"),
        (31, "January 31st, 2024"),
    ],
)
def test_format_date_with_suffix(day, expected):
    assert format_date_with_suffix(datetime(2024, 1, day)) == expected


def test_format_date_with_suffix_accepts_strings():
    assert format_date_with_suffix("2024-07-04") == "July 4th, 2024"
    with pytest.raises(ValueError):
        format_date_with_suffix("nonsense")


@pytest.mark.parametrize(
    "month, year, expected",
    [
        (1, 2023, 31),
        (2, 2023, 28),
        (2, 2024, 29),
        (2, 1900, 28),
        (2, 2000, 29),
        (4, 2024, 30),
        (13, 2023, 31),
        (0, 2024, 31),
    ],
)
def test_days_in(month, year, expected):
    assert days_in(month, year) == expected


def test_get_days_in_month():
    assert get_days_in_month("February", 2024) == 29
    assert get_days_in_month("February", 2023) == 28
    assert get_days_in_month("april", 2023) == 30
    assert get_days_in_month("Smarch", 2023) == 31


def test_get_month_from_name():
    assert get_month_from_name("December") == 12
    assert get_month_from_name(" march ") == 3
    assert get_month_from_name("bogus") == 1


def test_beginning_and_end_of_day_keep_timezone():
    tz = timezone(timedelta(hours=2))
    moment = datetime(2024, 5, 6, 14, 45, 12, 999, tzinfo=tz)

    assert beginning_of_day(moment) == datetime(2024, 5, 6, 0, 0, 0, tzinfo=tz)
    assert end_of_day(moment) == datetime(2024, 5, 6, 23, 59, 59, tzinfo=tz)
    assert end_of_day(moment).tzinfo is tz

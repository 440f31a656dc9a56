"""Tests for chemsonlab/domain/temporal.py — duration and timestamp codec."""

from datetime import datetime, timedelta

import pytest

from chemsonlab.domain.errors import FormatError
from chemsonlab.domain.temporal import format_date, format_duration, parse_date, parse_duration


# --- durations ---

def test_ninety_minutes_formats_as_clock():
    assert format_duration(timedelta(minutes=90)) == "01:30:00"


def test_ninety_minutes_parses_back():
    assert parse_duration("01:30:00") == timedelta(minutes=90)


def test_format_duration_zero():
    assert format_duration(timedelta(0)) == "00:00:00"


def test_format_duration_drops_subsecond_precision():
    assert format_duration(timedelta(seconds=5, milliseconds=900)) == "00:00:05"


def test_format_duration_hours_grow_past_two_digits():
    assert format_duration(timedelta(days=5, hours=1)) == "121:00:00"


def test_format_duration_rejects_negative():
    with pytest.raises(FormatError):
        format_duration(timedelta(seconds=-1))


@pytest.mark.parametrize("seconds", [0, 1, 59, 60, 3599, 3600, 45296, 86399])
def test_duration_round_trips_within_a_day(seconds):
    value = timedelta(seconds=seconds)
    assert parse_duration(format_duration(value)) == value


def test_parse_duration_accepts_unpadded_hours():
    assert parse_duration("1:02:03") == timedelta(hours=1, minutes=2, seconds=3)


def test_parse_duration_accepts_fraction():
    assert parse_duration("00:00:01.5") == timedelta(seconds=1, milliseconds=500)


def test_parse_duration_strips_whitespace():
    assert parse_duration("  00:10:00 ") == timedelta(minutes=10)


def test_parse_duration_falls_back_to_iso8601():
    assert parse_duration("PT1H30M") == timedelta(minutes=90)


@pytest.mark.parametrize("value", [None, "", "   "])
def test_parse_duration_rejects_absent_input(value):
    with pytest.raises(FormatError):
        parse_duration(value)


@pytest.mark.parametrize("value", ["abc", "--", "12:xx:00"])
def test_parse_duration_rejects_garbage(value):
    with pytest.raises(FormatError):
        parse_duration(value)


def test_format_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_duration("nope")


# --- timestamps ---

def test_format_date_pads_every_component():
    assert format_date(datetime(2024, 3, 5, 7, 4)) == "05/03/2024 07:04"


def test_format_date_drops_seconds():
    assert format_date(datetime(2024, 3, 5, 7, 4, 59)) == "05/03/2024 07:04"


def test_format_date_keeps_four_digit_year():
    assert format_date(datetime(999, 1, 1, 0, 0)) == "01/01/0999 00:00"


def test_parse_date_accepts_unpadded_components():
    assert parse_date("5/3/2024 7:04") == datetime(2024, 3, 5, 7, 4)


def test_parse_date_is_day_first():
    assert parse_date("01/02/2024 00:00").month == 2


@pytest.mark.parametrize(
    "value",
    [
        datetime(2024, 1, 15, 8, 30),
        datetime(2024, 12, 31, 23, 59, 59),
        datetime(2000, 2, 29, 0, 0),
        datetime(1999, 7, 4, 12, 1, 30, 500),
    ],
)
def test_parse_date_accepts_everything_format_date_emits(value):
    assert parse_date(format_date(value)) == value.replace(second=0, microsecond=0)


@pytest.mark.parametrize("value", [None, "", "  "])
def test_parse_date_rejects_absent_input(value):
    with pytest.raises(FormatError):
        parse_date(value)


@pytest.mark.parametrize(
    "value",
    ["2024-01-15 08:30", "15/01/24 08:30", "15/01/2024", "31/02/2024 10:00", "15/01/2024 25:00"],
)
def test_parse_date_rejects_other_shapes_and_impossible_dates(value):
    with pytest.raises(FormatError):
        parse_date(value)

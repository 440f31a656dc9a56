"""Tests for chemsonlab/infrastructure/query/parsers.py — raw filter value parsing."""

from datetime import date

import pytest

from chemsonlab.infrastructure.query import parsers


# --- boolean ---

@pytest.mark.parametrize("raw,expected", [("true", True), ("False", False), (" TRUE ", True)])
def test_boolean_accepts_true_false_any_case(raw, expected):
    assert parsers.boolean(raw) is expected


@pytest.mark.parametrize("raw", ["yes", "1", "t", "truthy"])
def test_boolean_rejects_other_words(raw):
    with pytest.raises(ValueError):
        parsers.boolean(raw)


# --- integer ---

@pytest.mark.parametrize("raw,expected", [("42", 42), ("-7", -7), ("+3", 3), (" 10 ", 10)])
def test_integer_accepts_signed_digits(raw, expected):
    assert parsers.integer(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "1.5", "1e3", "12abc", "--1"])
def test_integer_rejects_non_integers(raw):
    with pytest.raises(ValueError):
        parsers.integer(raw)


# --- char ---

def test_char_accepts_single_character():
    assert parsers.char("A") == "A"


@pytest.mark.parametrize("raw", ["AB", ""])
def test_char_rejects_other_lengths(raw):
    with pytest.raises(ValueError):
        parsers.char(raw)


# --- day ---

@pytest.mark.parametrize(
    "raw",
    ["2024-01-15", "2024-01-15T08:30:00", "15/01/2024", "15/1/2024", "15/01/2024 08:30"],
)
def test_day_accepts_iso_and_display_formats(raw):
    assert parsers.day(raw) == date(2024, 1, 15)


@pytest.mark.parametrize("raw", ["yesterday", "2024-13-01", "31/02/2024", "15-01-2024"])
def test_day_rejects_unparsable_dates(raw):
    with pytest.raises(ValueError):
        parsers.day(raw)


# --- text ---

def test_text_is_verbatim():
    assert parsers.text("Batch-001 ") == "Batch-001 "

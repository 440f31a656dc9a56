"""Parsers for raw, string-valued query parameters.

Each parser takes a non-blank string and returns a typed value or raises
ValueError.  The filter layer turns ValueError into "filter not applied", so
these can afford to be strict.
"""

from __future__ import annotations

import re
from datetime import date, datetime

from chemsonlab.domain.errors import FormatError
from chemsonlab.domain.temporal import parse_date

_INTEGER = re.compile(r"^[+-]?\d+$")
_DAY = re.compile(r"^(?P<d>\d{1,2})/(?P<m>\d{1,2})/(?P<y>\d{4})$")


def text(raw: str) -> str:
    """Strings are taken verbatim."""
    return raw


def boolean(raw: str) -> bool:
    value = raw.strip().lower()
    if value == "true":
        return True
    if value == "false":
        return False
    raise ValueError(f"Not a boolean: {raw!r}")


def integer(raw: str) -> int:
    value = raw.strip()
    if not _INTEGER.match(value):
        raise ValueError(f"Not an integer: {raw!r}")
    return int(value)


def char(raw: str) -> str:
    if len(raw) != 1:
        raise ValueError(f"Not a single character: {raw!r}")
    return raw


def day(raw: str) -> date:
    """Calendar day from ISO (2024-01-15, 2024-01-15T08:30) or d/m/YYYY [H:MM]."""
    value = raw.strip()
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        pass

    match = _DAY.match(value)
    if match:
        return date(int(match.group("y")), int(match.group("m")), int(match.group("d")))

    try:
        return parse_date(value).date()
    except FormatError as exc:
        raise ValueError(f"Not a date: {raw!r}") from exc

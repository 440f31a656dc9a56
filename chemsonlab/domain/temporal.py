"""Temporal codec: storage-native durations/timestamps <-> wire strings.

Durations travel as zero-padded ``HH:MM:SS``; timestamps as
``dd/mm/YYYY HH:MM``.  Parsing a timestamp accepts ``d/m/YYYY H:MM`` (no
padding required), which covers everything format_date() can emit.

Absent values are the caller's business: passing None or "" to either parser
raises FormatError rather than silently producing a zero duration or epoch.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from pydantic import TypeAdapter, ValidationError

from .errors import FormatError

_CLOCK = re.compile(r"^(?P<h>\d+):(?P<m>[0-5]\d):(?P<s>[0-5]\d)(?:\.(?P<f>\d{1,6}))?$")
_TIMESTAMP = re.compile(
    r"^(?P<d>\d{1,2})/(?P<mo>\d{1,2})/(?P<y>\d{4}) (?P<h>\d{1,2}):(?P<mi>\d{2})$"
)
_TIMEDELTA = TypeAdapter(timedelta)


def format_duration(value: timedelta) -> str:
    """Render a duration as HH:MM:SS (sub-second precision is dropped)."""
    if value < timedelta(0):
        raise FormatError(f"Cannot format negative duration {value!r}")
    total = int(value.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_duration(value: str | None) -> timedelta:
    """Parse HH:MM:SS, falling back to pydantic's timedelta grammar (ISO 8601 etc.)."""
    if value is None or not value.strip():
        raise FormatError("Duration value is absent")
    text = value.strip()

    match = _CLOCK.match(text)
    if match:
        fraction = (match.group("f") or "").ljust(6, "0")
        return timedelta(
            hours=int(match.group("h")),
            minutes=int(match.group("m")),
            seconds=int(match.group("s")),
            microseconds=int(fraction),
        )

    try:
        return _TIMEDELTA.validate_python(text)
    except ValidationError as exc:
        raise FormatError(f"Unrecognised duration {value!r}") from exc


def format_date(value: datetime) -> str:
    """Render a timestamp as dd/mm/YYYY HH:MM (seconds are dropped)."""
    return (
        f"{value.day:02d}/{value.month:02d}/{value.year:04d} "
        f"{value.hour:02d}:{value.minute:02d}"
    )


def parse_date(value: str | None) -> datetime:
    """Parse d/m/YYYY H:MM into a naive datetime."""
    if value is None or not value.strip():
        raise FormatError("Timestamp value is absent")

    match = _TIMESTAMP.match(value.strip())
    if match is None:
        raise FormatError(f"Unrecognised timestamp {value!r}, expected dd/mm/yyyy HH:MM")
    try:
        return datetime(
            int(match.group("y")),
            int(match.group("mo")),
            int(match.group("d")),
            int(match.group("h")),
            int(match.group("mi")),
        )
    except ValueError as exc:  # e.g. 31/02/2024 or 25:00
        raise FormatError(f"Invalid timestamp {value!r}") from exc

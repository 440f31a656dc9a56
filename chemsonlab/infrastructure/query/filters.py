"""Named, optional, string-parsed filter predicates.

A Filter pairs a raw-string parser with a predicate builder.  FilterSet
turns a mapping of raw request values into SQL WHERE clauses:

  - names match case-insensitively, an exact-case key winning;
  - absent input (None, "", whitespace) is skipped;
  - input the parser rejects (ValueError) is skipped, never raised;
  - everything else is ANDed together.

String filters come in two flavours that may coexist on one entity:
``contains`` (case-insensitive substring) and ``exact`` (equality).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, time, timedelta
from typing import Any

from sqlalchemy import ColumnElement

from . import parsers
from .loading import Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Filter:
    """One named filter.

    field is the dotted attribute the predicate reads; its relationship path
    must be declared in the entity's LoadSpec.
    """

    name: str
    field: str
    parse: Callable[[str], Any]
    predicate: Callable[[Any, Any], ColumnElement[bool]]

    def clause(self, source: Source, value: Any) -> ColumnElement[bool]:
        return self.predicate(source.column(self.field), value)


def contains(name: str, field: str) -> Filter:
    return Filter(
        name, field, parsers.text, lambda column, value: column.icontains(value, autoescape=True)
    )


def exact(name: str, field: str) -> Filter:
    return equals(name, field, parsers.text)


def equals(name: str, field: str, parse: Callable[[str], Any]) -> Filter:
    return Filter(name, field, parse, lambda column, value: column == value)


def same_day(name: str, field: str) -> Filter:
    """Matches timestamps falling anywhere on the given calendar day."""

    def _on(column: Any, value: Any) -> ColumnElement[bool]:
        start = datetime.combine(value, time.min)
        return (column >= start) & (column < start + timedelta(days=1))

    return Filter(name, field, parsers.day, _on)


class FilterSet:
    def __init__(self, *filters: Filter) -> None:
        names = [f.name.lower() for f in filters]
        if len(names) != len(set(names)):
            raise ValueError(f"Duplicate filter names in {names}")
        self._filters = tuple(filters)

    def __iter__(self):
        return iter(self._filters)

    def __len__(self) -> int:
        return len(self._filters)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self._filters)

    def clauses(
        self, source: Source, raw: Mapping[str, str | None] | None
    ) -> list[ColumnElement[bool]]:
        if not raw:
            return []

        folded = {key.lower(): value for key, value in raw.items()}
        clauses = []
        for flt in self._filters:
            value = raw.get(flt.name)
            if value is None:
                value = folded.get(flt.name.lower())
            if value is None or not value.strip():
                continue
            try:
                parsed = flt.parse(value)
            except ValueError:
                logger.debug("Ignoring filter %s: unparsable value %r", flt.name, value)
                continue
            clauses.append(flt.clause(source, parsed))
        return clauses

"""Named sort keys, selectable by (case-insensitive) name.

Nulls sort as the minimum: first when ascending, last when descending.  The
primary key is appended as a tiebreak in the same direction, so a descending
sort is always the exact reverse of the ascending one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .loading import Source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SortKey:
    name: str
    field: str


class SortSet:
    def __init__(self, *keys: SortKey) -> None:
        self._keys = {key.name.lower(): key for key in keys}
        if len(self._keys) != len(keys):
            raise ValueError(f"Duplicate sort key names in {[k.name for k in keys]}")

    def __iter__(self):
        return iter(self._keys.values())

    def __len__(self) -> int:
        return len(self._keys)

    def get(self, name: str | None) -> SortKey | None:
        if name is None or not name.strip():
            return None
        return self._keys.get(name.strip().lower())

    def order_by(
        self, source: Source, sort_by: str | None, ascending: bool, tiebreak: Any
    ) -> list[Any]:
        """ORDER BY clauses for sort_by, or [] when absent or unrecognised."""
        key = self.get(sort_by)
        if key is None:
            if sort_by and sort_by.strip():
                logger.warning("Unknown sort key %r ignored", sort_by)
            return []

        column = source.column(key.field)
        if ascending:
            return [column.asc().nulls_first(), tiebreak.asc()]
        return [column.desc().nulls_last(), tiebreak.desc()]

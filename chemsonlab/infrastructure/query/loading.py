"""Related-entity loading for dynamic queries.

A LoadSpec names the relationship paths an entity kind needs joined, e.g.
``LoadSpec("batch.product", "test_result.product", "test_result.machine")``.
Each path is outer-joined through its own alias (the same table may be
reached along two paths) and populated with contains_eager, so the rows come
back with their related entities attached in a single round trip.

Filters and sort keys refer to columns by dotted field name
(``"test_result.product.name"``); Source resolves those against the aliases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import aliased, contains_eager


def join_path(field: str) -> str:
    """The relationship path part of a dotted field name ("" for own columns)."""
    return field.rpartition(".")[0]


def _with_prefixes(paths: tuple[str, ...]) -> tuple[str, ...]:
    expanded: set[str] = set()
    for path in paths:
        parts = path.split(".")
        for i in range(1, len(parts) + 1):
            expanded.add(".".join(parts[:i]))
    # Parents before children; ties broken alphabetically for stable SQL.
    return tuple(sorted(expanded, key=lambda p: (p.count("."), p)))


class Source:
    """Resolves dotted field names to columns of the root entity or its joins."""

    def __init__(self, model: type, aliases: dict[str, Any]) -> None:
        self.model = model
        self._aliases = aliases

    def column(self, field: str) -> Any:
        path, _, attr = field.rpartition(".")
        entity = self._aliases[path] if path else self.model
        return getattr(entity, attr)


@dataclass(frozen=True, init=False)
class LoadSpec:
    paths: tuple[str, ...]

    def __init__(self, *paths: str) -> None:
        object.__setattr__(self, "paths", _with_prefixes(paths))

    def covers(self, path: str) -> bool:
        return not path or path in self.paths

    def apply(self, stmt: Select, model: type) -> tuple[Select, Source]:
        aliases: dict[str, Any] = {}
        loaders: dict[str, Any] = {}

        for path in self.paths:
            parent_path, _, key = path.rpartition(".")
            parent = aliases[parent_path] if parent_path else model
            relationship = getattr(parent, key)
            target = aliased(relationship.property.mapper.class_)
            hop = relationship.of_type(target)

            stmt = stmt.outerjoin(hop)
            loaders[path] = (
                loaders[parent_path].contains_eager(hop) if parent_path else contains_eager(hop)
            )
            aliases[path] = target

        # A chained loader already covers its parents; only pass the leaves.
        leaves = [
            loader
            for path, loader in loaders.items()
            if not any(other.startswith(path + ".") for other in loaders)
        ]
        if leaves:
            stmt = stmt.options(*leaves)
        return stmt, Source(model, aliases)

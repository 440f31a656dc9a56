"""Query composition and execution.

QuerySpec bundles the static per-entity configuration (loads, filters, sort
keys) and composes a SELECT in a fixed order: joins, then WHERE, then
ORDER BY.  execute() runs it on the caller's session and materializes a list.

Store access failures surface as StoreError; malformed filter or sort input
never does (see filters.py / sorting.py).
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Iterator

from sqlalchemy import Select, inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chemsonlab.domain.errors import StoreCancelledError, StoreError

from .filters import FilterSet
from .loading import LoadSpec, join_path
from .sorting import SortSet


@dataclass(frozen=True)
class QuerySpec:
    """Static query configuration for one entity kind.

    Raises ValueError at construction if a filter or sort key reads through a
    relationship path the LoadSpec does not join.
    """

    model: type
    load: LoadSpec = field(default_factory=LoadSpec)
    filters: FilterSet = field(default_factory=FilterSet)
    sorts: SortSet = field(default_factory=SortSet)

    def __post_init__(self) -> None:
        fields = [(f.name, f.field) for f in self.filters] + [(k.name, k.field) for k in self.sorts]
        for name, dotted in fields:
            path = join_path(dotted)
            if not self.load.covers(path):
                raise ValueError(
                    f"{self.model.__name__}: {name!r} reads {dotted!r} but {path!r} is not loaded"
                )

    @property
    def primary_key(self) -> Any:
        return inspect(self.model).primary_key[0]

    def select(self) -> tuple[Select, Any]:
        """Base SELECT with every declared relationship joined and eager-loaded."""
        return self.load.apply(select(self.model), self.model)

    def statement(
        self,
        filters: Mapping[str, str | None] | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> Select:
        stmt, source = self.select()
        clauses = self.filters.clauses(source, filters)
        if clauses:
            stmt = stmt.where(*clauses)
        order = self.sorts.order_by(source, sort_by, ascending, self.primary_key)
        if order:
            stmt = stmt.order_by(*order)
        return stmt


@contextmanager
def store_errors(action: str) -> Iterator[None]:
    """Translate driver/ORM failures raised inside the block into StoreError.

    Cancellation becomes StoreCancelledError, which is still a CancelledError,
    so an enclosing asyncio.timeout() reports it as TimeoutError (Python 3.12+).
    """
    try:
        yield
    except asyncio.CancelledError as exc:
        raise StoreCancelledError(f"{action} was cancelled") from exc
    except (SQLAlchemyError, OSError, TimeoutError) as exc:
        raise StoreError(f"{action} failed: {exc}") from exc


async def execute(
    session: AsyncSession,
    spec: QuerySpec,
    filters: Mapping[str, str | None] | None = None,
    sort_by: str | None = None,
    ascending: bool = True,
) -> list[Any]:
    """Run the composed query and return the matching ORM rows as a list."""
    stmt = spec.statement(filters, sort_by, ascending)
    with store_errors(f"Querying {spec.model.__name__}"):
        result = await session.execute(stmt)
        return list(result.scalars().all())


async def fetch_one(session: AsyncSession, spec: QuerySpec, *criteria: Any) -> Any | None:
    """Point lookup with the QuerySpec's loads applied; None when nothing matches."""
    stmt, _ = spec.select()
    with store_errors(f"Fetching {spec.model.__name__}"):
        result = await session.execute(stmt.where(*criteria))
        return result.scalar_one_or_none()

"""Generic SQLAlchemy implementation of Repository[T].

Every entity kind shares the same CRUD and query behaviour; a concrete
repository only names its EntityKind and domain model.  Joins, filters and
sort keys come from QUERY_SPECS, so list() and get_by_id() always return
entities with their declared related entities attached.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from chemsonlab.domain.models.enums import EntityKind
from chemsonlab.domain.repositories.base import Repository
from chemsonlab.infrastructure.persistence.queries import QUERY_SPECS
from chemsonlab.infrastructure.query import execute, fetch_one, store_errors

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def _row_values(row: Any) -> dict[str, Any]:
    """Column values plus already-loaded relationships, as nested dicts.

    Unloaded attributes are skipped rather than touched: under an
    AsyncSession a lazy load would raise instead of issuing IO.
    """
    state = inspect(row)
    unloaded = state.unloaded
    values = {
        attr.key: getattr(row, attr.key)
        for attr in state.mapper.column_attrs
        if attr.key not in unloaded
    }
    for rel in state.mapper.relationships:
        if rel.key in unloaded:
            continue
        related = getattr(row, rel.key)
        values[rel.key] = None if related is None else _row_values(related)
    return values


class SqlRepository(Repository[T]):
    kind: ClassVar[EntityKind]
    domain_model: ClassVar[type[BaseModel]]
    # Columns update() leaves untouched; they are set on create only.
    kept_on_update: ClassVar[frozenset[str]] = frozenset()

    def __init__(self, session: AsyncSession) -> None:
        self._session = session
        self._spec = QUERY_SPECS[self.kind]

    @property
    def _model(self) -> type:
        return self._spec.model

    @property
    def _columns(self) -> set[str]:
        return {attr.key for attr in inspect(self._model).column_attrs}

    @property
    def _updatable(self) -> set[str]:
        return self._columns - {"id"} - self.kept_on_update

    def _to_domain(self, row: Any) -> T:
        return self.domain_model.model_validate(_row_values(row))

    async def get_by_id(self, id: int) -> T | None:
        row = await fetch_one(self._session, self._spec, self._spec.primary_key == id)
        return self._to_domain(row) if row is not None else None

    async def list(
        self,
        filters: Mapping[str, str | None] | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> list[T]:
        rows = await execute(self._session, self._spec, filters, sort_by, ascending)
        return [self._to_domain(row) for row in rows]

    async def create(self, entity: T) -> T:
        values = entity.model_dump(include=self._columns)
        if values.get("id") is None:
            values.pop("id", None)
        row = self._model(**values)
        with store_errors(f"Creating {self._model.__name__}"):
            self._session.add(row)
            await self._session.flush()
        logger.debug("Created %s id=%s", self._model.__name__, row.id)
        return self._to_domain(row)

    async def update(self, id: int, entity: T) -> T | None:
        with store_errors(f"Updating {self._model.__name__} id={id}"):
            row = await self._session.get(self._model, id)
            if row is None:
                return None
            for key, value in entity.model_dump(include=self._updatable).items():
                setattr(row, key, value)
            await self._session.flush()
            # Reload columns; relationships are expired so a changed FK is not
            # reported with the stale related entity.
            await self._session.refresh(row)
        return self._to_domain(row)

    async def delete(self, id: int) -> T | None:
        row = await fetch_one(self._session, self._spec, self._spec.primary_key == id)
        if row is None:
            return None
        removed = self._to_domain(row)
        with store_errors(f"Deleting {self._model.__name__} id={id}"):
            await self._session.delete(row)
            await self._session.flush()
        logger.debug("Deleted %s id=%s", self._model.__name__, id)
        return removed

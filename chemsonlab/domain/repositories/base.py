"""Generic repository base interface.

Repository[T] is the single data-access abstraction for every entity kind.
The concrete implementation lives in chemsonlab/infrastructure/persistence/
and is wired at the application boundary via get_repositories().

Design notes:
  - All methods are async to accommodate async database drivers.
  - T is the domain model type (never an ORM row or DTO).
  - list() takes raw, optional, string-valued filters exactly as they arrive
    from a request.  Which names are recognised, and how each is parsed, is
    declared per entity kind; unrecognised or malformed values are ignored.
  - Absence is a return value: get_by_id/update/delete return None when no
    row matches.  Store failures raise StoreError.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Generic, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Abstract CRUD + query interface for a domain entity."""

    @abstractmethod
    async def get_by_id(self, id: int) -> T | None:
        """Return the entity (with its related entities loaded), or None."""

    @abstractmethod
    async def list(
        self,
        filters: Mapping[str, str | None] | None = None,
        sort_by: str | None = None,
        ascending: bool = True,
    ) -> list[T]:
        """Return every entity matching all applicable filters, optionally sorted."""

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with its generated id."""

    @abstractmethod
    async def update(self, id: int, entity: T) -> T | None:
        """Overwrite the entity's columns; None if no row has this id."""

    @abstractmethod
    async def delete(self, id: int) -> T | None:
        """Remove the entity and return what was removed; None if absent."""

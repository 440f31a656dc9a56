"""Request-facing service over the repositories.

LabService accepts what an HTTP handler has at hand (an entity kind, the raw
query-string mapping, a JSON payload) and returns read DTOs.  It owns no
transaction: the caller supplies the session, typically from session_scope().

Malformed query input never raises here.  Store failures are logged and
re-raised as StoreError for the host to turn into a server error; payload
problems raise pydantic's ValidationError or FormatError.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from chemsonlab.domain.errors import StoreCancelledError, StoreError
from chemsonlab.domain.models.enums import EntityKind
from chemsonlab.infrastructure.persistence.repositories import get_repositories
from chemsonlab.infrastructure.query import parsers

from .dto import Dto
from .mapping import from_dto, request_type, to_dto

logger = logging.getLogger(__name__)

SORT_BY = "sortBy"
IS_ASCENDING = "isAscending"


def _ascending(raw: str | None) -> bool:
    """isAscending defaults to true; unparsable values fall back to the default."""
    if raw is None or not raw.strip():
        return True
    try:
        return parsers.boolean(raw)
    except ValueError:
        logger.debug("Ignoring %s=%r", IS_ASCENDING, raw)
        return True


class LabService:
    def __init__(self, session: AsyncSession) -> None:
        self._repos = get_repositories(session)

    async def list(
        self, kind: EntityKind | str, params: Mapping[str, str | None] | None = None
    ) -> list[Dto]:
        """All entities of a kind matching the filters in params.

        params is the raw query-string mapping; sortBy and isAscending are
        taken from it and every other entry is offered to the kind's filters.
        """
        filters = dict(params or {})
        sort_by = filters.pop(SORT_BY, None)
        ascending = _ascending(filters.pop(IS_ASCENDING, None))
        repo = self._repos.for_kind(kind)
        entities = await self._call(f"list {kind}", repo.list(filters, sort_by, ascending))
        return [to_dto(entity) for entity in entities]

    async def get(self, kind: EntityKind | str, id: int) -> Dto | None:
        repo = self._repos.for_kind(kind)
        entity = await self._call(f"get {kind} id={id}", repo.get_by_id(id))
        return to_dto(entity) if entity is not None else None

    async def create(self, kind: EntityKind | str, payload: Mapping[str, Any] | Dto) -> Dto:
        repo = self._repos.for_kind(kind)
        entity = self._to_domain(repo.domain_model, payload)
        created = await self._call(f"create {kind}", repo.create(entity))
        return to_dto(created)

    async def update(
        self, kind: EntityKind | str, id: int, payload: Mapping[str, Any] | Dto
    ) -> Dto | None:
        repo = self._repos.for_kind(kind)
        entity = self._to_domain(repo.domain_model, payload)
        updated = await self._call(f"update {kind} id={id}", repo.update(id, entity))
        return to_dto(updated) if updated is not None else None

    async def delete(self, kind: EntityKind | str, id: int) -> Dto | None:
        repo = self._repos.for_kind(kind)
        removed = await self._call(f"delete {kind} id={id}", repo.delete(id))
        return to_dto(removed) if removed is not None else None

    @staticmethod
    def _to_domain(domain_cls: type, payload: Mapping[str, Any] | Dto) -> Any:
        if not isinstance(payload, Dto):
            payload = request_type(domain_cls).model_validate(payload)
        return from_dto(payload, domain_cls)

    @staticmethod
    async def _call(action: str, awaitable: Any) -> Any:
        try:
            return await awaitable
        except StoreCancelledError:
            raise
        except StoreError:
            logger.exception("Store failure during %s", action)
            raise

"""Generic entity service — the lifecycle every entity shares.

How to add a new service:
  1. class MyEntityService(EntityService[MyEntity, MyEntityOut]):
         entity_name = "MyEntity"
         repository_class = MyEntityRepository
         out_schema = MyEntityOut
         defaults = {"is_active": True}
         scope_fields = ("distributor_id",)
  2. Add entity-specific lookups with find_by / transitions with transition()
  3. Override _before_write for rules that must run before create and update

Rules:
  - get() returns None when absent; update/delete/transitions raise NotFoundError.
  - Scope (parent key from the URL) is forced onto writes and filters; a row
    outside the scope is treated as absent.
  - Writes are compare-and-swap on lock_version; a lost race raises ConflictError.
  - created_at/created_by are never taken from a request body.

No FastAPI here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import ConflictError, NotFoundError
from distributor_mgmt.core.filtering import FilterRequest
from distributor_mgmt.core.pagination import PaginationResponse
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.repositories.base import BaseRepository

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
OutT = TypeVar("OutT", bound=BaseModel)

Scope = Optional[Mapping[str, Any]]

# Maintained by the service, never copied from a request body
SERVER_FIELDS = ("id", "created_at", "created_by", "updated_at", "updated_by", "lock_version")


class EntityService(Generic[ModelT, OutT]):
    entity_name: str
    repository_class: type[BaseRepository]
    out_schema: type[OutT]
    # Applied on create when the incoming value is None; callables are invoked
    defaults: Mapping[str, Any] = {}
    # Parent keys a nested resource is addressed under, e.g. ("distributor_id",)
    scope_fields: tuple[str, ...] = ()

    def __init__(self, session: AsyncSession, repository: BaseRepository | None = None):
        self._session = session
        self._repo = repository if repository is not None else self.repository_class(session)

    # ------------------------------------------------------------------
    # Mapping helpers
    # ------------------------------------------------------------------

    def to_out(self, row: ModelT) -> OutT:
        return self.out_schema.model_validate(row)

    @staticmethod
    def _values(data: BaseModel | Mapping[str, Any]) -> dict[str, Any]:
        raw = data.model_dump() if isinstance(data, BaseModel) else dict(data)
        for field in SERVER_FIELDS:
            raw.pop(field, None)
        return {k: v.value if isinstance(v, Enum) else v for k, v in raw.items()}

    @staticmethod
    def _expected_version(data: BaseModel | Mapping[str, Any]) -> int | None:
        if isinstance(data, BaseModel):
            return getattr(data, "lock_version", None)
        return data.get("lock_version")

    @staticmethod
    def _in_scope(row: ModelT, scope: Scope) -> bool:
        return all(getattr(row, k) == v for k, v in (scope or {}).items())

    # ------------------------------------------------------------------
    # Hooks
    # ------------------------------------------------------------------

    async def _before_write(
        self, values: dict[str, Any], existing: ModelT | None, actor: str | None
    ) -> None:
        """Entity rules run before create (existing is None) and update. May mutate values."""

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def require(self, entity_id: str, scope: Scope = None) -> ModelT:
        """Return the row or raise NotFoundError."""
        row = await self._repo.get_by_id(entity_id)
        if row is None or not self._in_scope(row, scope):
            logger.warning("%s not found id=%s scope=%s", self.entity_name, entity_id, scope)
            raise NotFoundError(self.entity_name, entity_id)
        return row

    async def get(self, entity_id: str, scope: Scope = None) -> OutT | None:
        logger.debug("Fetching %s id=%s", self.entity_name, entity_id)
        row = await self._repo.get_by_id(entity_id)
        if row is None or not self._in_scope(row, scope):
            return None
        return self.to_out(row)

    async def filter(
        self, request: FilterRequest[Any], scope: Scope = None
    ) -> PaginationResponse[OutT]:
        return await self._repo.filter_engine(self.to_out).filter(request, scope)

    async def find_by(self, **equals: Any) -> list[OutT]:
        return [self.to_out(row) for row in await self._repo.find_by(**equals)]

    async def find_one_by(self, **equals: Any) -> OutT | None:
        row = await self._repo.find_one_by(**equals)
        return self.to_out(row) if row is not None else None

    async def exists_by(self, **equals: Any) -> bool:
        return await self._repo.exists_by(**equals)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(
        self,
        data: BaseModel | Mapping[str, Any],
        actor: str | None = None,
        scope: Scope = None,
    ) -> OutT:
        values = self._values(data)
        values.update(scope or {})
        for field, default in self.defaults.items():
            if values.get(field) is None:
                values[field] = default() if callable(default) else default
        await self._before_write(values, None, actor)

        if self._repo.is_versioned:
            now = utcnow()
            values.update(
                created_at=now, created_by=actor, updated_at=now, updated_by=actor, lock_version=1
            )
        row = await self._repo.create(**values)
        logger.info("%s created id=%s", self.entity_name, row.id)
        return self.to_out(row)

    async def update(
        self,
        entity_id: str,
        data: BaseModel | Mapping[str, Any],
        actor: str | None = None,
        scope: Scope = None,
    ) -> OutT:
        """Replace every client-writable field of the row with ``data``."""
        existing = await self.require(entity_id, scope)
        values = self._values(data)
        values.update(scope or {})
        for field in self.scope_fields:
            if values.get(field) is None:
                values[field] = getattr(existing, field)
        await self._before_write(values, existing, actor)

        row = await self._write(existing, values, actor, self._expected_version(data))
        logger.info("%s updated id=%s", self.entity_name, entity_id)
        return self.to_out(row)

    async def transition(
        self,
        entity_id: str,
        actor: str | None = None,
        scope: Scope = None,
        **changes: Any,
    ) -> OutT:
        """Set a few fields (plus the update-audit pair) on an existing row."""
        existing = await self.require(entity_id, scope)
        row = await self._write(existing, changes, actor)
        logger.info("%s id=%s set %s", self.entity_name, entity_id, sorted(changes))
        return self.to_out(row)

    async def activate(self, entity_id: str, actor: str | None = None, scope: Scope = None) -> OutT:
        return await self.transition(entity_id, actor, scope, is_active=True)

    async def deactivate(self, entity_id: str, actor: str | None = None, scope: Scope = None) -> OutT:
        return await self.transition(entity_id, actor, scope, is_active=False)

    async def delete(self, entity_id: str, scope: Scope = None) -> None:
        await self.require(entity_id, scope)
        await self._repo.delete(entity_id)
        logger.info("%s deleted id=%s", self.entity_name, entity_id)

    async def _write(
        self,
        existing: ModelT,
        values: Mapping[str, Any],
        actor: str | None,
        expected_version: int | None = None,
    ) -> ModelT:
        values = dict(values)
        if self._repo.is_versioned:
            values.update(updated_at=utcnow(), updated_by=actor)
            if expected_version is None:
                expected_version = existing.lock_version

        row = await self._repo.update(existing.id, values, expected_version)
        if row is None:
            logger.warning(
                "%s id=%s lost update (expected lockVersion=%s)",
                self.entity_name, existing.id, expected_version,
            )
            raise ConflictError(
                f"{self.entity_name} '{existing.id}' was modified by another request",
                entity=self.entity_name,
                entity_id=existing.id,
            )
        return row

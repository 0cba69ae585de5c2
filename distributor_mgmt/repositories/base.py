"""Generic async repository: point lookups, equality finders, compare-and-swap writes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from sqlalchemy import delete, exists, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.filtering import FilterEngine, FilterOp
from distributor_mgmt.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)
DtoT = TypeVar("DtoT")


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over one model.

    Subclasses set ``model`` and declare the filterable surface explicitly in
    ``filter_fields``; anything not listed there is ignored by /filter.
    """

    model: type[ModelT]
    filter_fields: Mapping[str, FilterOp] = {}
    default_sort: tuple[tuple[str, str], ...] = (("created_at", "desc"),)

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        return select(self.model)

    def _where(self, q, equals: Mapping[str, Any]):
        for col_name, value in equals.items():
            column = getattr(self.model, col_name)
            q = q.where(column.is_(None) if value is None else column == value)
        return q

    def _ordered(self, q):
        for col_name, direction in self.default_sort:
            col = getattr(self.model, col_name)
            q = q.order_by(col.desc() if direction == "desc" else col.asc())
        return q.order_by(self.model.id.asc())

    @property
    def is_versioned(self) -> bool:
        return hasattr(self.model, "lock_version")

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            self._base_query()
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def find_by(self, **equals: Any) -> list[ModelT]:
        """All rows whose columns equal the given values, in default order."""
        q = self._ordered(self._where(self._base_query(), equals))
        return list((await self._session.execute(q)).scalars().all())

    async def find_one_by(self, **equals: Any) -> ModelT | None:
        q = self._ordered(self._where(self._base_query(), equals)).limit(1)
        return (await self._session.execute(q)).scalars().first()

    async def exists_by(self, **equals: Any) -> bool:
        q = select(exists(self._where(select(self.model.id), equals)))
        return bool((await self._session.execute(q)).scalar())

    def filter_engine(self, to_dto: Callable[[ModelT], DtoT]) -> FilterEngine[ModelT, DtoT]:
        return FilterEngine(
            self._session, self.model, to_dto, self.filter_fields, self.default_sort
        )

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id and column defaults
        await self._session.refresh(instance)
        return instance

    async def update(
        self,
        entity_id: str,
        values: Mapping[str, Any],
        expected_version: int | None = None,
    ) -> ModelT | None:
        """Write ``values`` to one row; None when no row matched.

        For versioned models the write only applies while ``lock_version`` still
        equals ``expected_version``, and bumps it.
        """
        values = {getattr(self.model, k): v for k, v in values.items() if k != "id"}
        stmt = update(self.model).where(self.model.id == entity_id)
        if self.is_versioned and expected_version is not None:
            stmt = stmt.where(self.model.lock_version == expected_version)
            values[self.model.lock_version] = expected_version + 1

        result = await self._session.execute(
            stmt.values(values).execution_options(synchronize_session=False)
        )
        await self._session.flush()
        if result.rowcount == 0:
            return None
        return await self.get_by_id(entity_id)

    async def delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            delete(self.model)
            .where(self.model.id == entity_id)
            .execution_options(synchronize_session=False)
        )
        await self._session.flush()
        return result.rowcount > 0

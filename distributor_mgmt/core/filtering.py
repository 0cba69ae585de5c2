"""Generic filter-criteria to query translation used by every /filter endpoint.

A repository declares which fields may be filtered and how (``filter_fields``);
the engine turns the non-null fields of a criteria object into SQL predicates,
counts the matches, and returns one page of mapped results.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_snake
from sqlalchemy import ColumnElement, Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.pagination import PaginationRequest, PaginationResponse, SortOrder
from distributor_mgmt.schemas.common import CamelModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")
DtoT = TypeVar("DtoT")
F = TypeVar("F")
V = TypeVar("V")


class FilterOp(str, Enum):
    EQ = "eq"
    PREFIX = "prefix"  # case-insensitive starts-with
    RANGE = "range"  # inclusive {gte, lte}


class Range(CamelModel, Generic[V]):
    """Inclusive bounds for a RANGE field; either side may be omitted."""

    gte: Optional[V] = None
    lte: Optional[V] = None


class FilterRequest(CamelModel, Generic[F]):
    """`{"filters": {...criteria...}, "pagination": {...}}`"""

    filters: Optional[F] = None
    pagination: PaginationRequest = Field(default_factory=PaginationRequest)


def criteria_of(filters: BaseModel | Mapping[str, Any] | None) -> dict[str, Any]:
    """Return the non-null criteria fields keyed by snake_case attribute name."""
    if filters is None:
        return {}
    if isinstance(filters, BaseModel):
        raw = filters.model_dump(exclude_none=True)
    else:
        raw = {to_snake(k): v for k, v in filters.items() if v is not None}
    return {k: v.value if isinstance(v, Enum) else v for k, v in raw.items()}


class FilterEngine(Generic[ModelT, DtoT]):
    """Build, count and page a filtered SELECT for one model."""

    def __init__(
        self,
        session: AsyncSession,
        model: type[ModelT],
        to_dto: Callable[[ModelT], DtoT],
        fields: Mapping[str, FilterOp],
        default_sort: Sequence[tuple[str, str]] = (("created_at", "desc"),),
    ):
        self._session = session
        self._model = model
        self._to_dto = to_dto
        self._fields = fields
        self._default_sort = default_sort
        self._columns = {attr.key for attr in inspect(model).column_attrs}

    # ------------------------------------------------------------------
    # Query building
    # ------------------------------------------------------------------

    def predicates(self, criteria: Mapping[str, Any]) -> list[ColumnElement[bool]]:
        """AND-able predicates for every allow-listed, non-null criteria field."""
        clauses: list[ColumnElement[bool]] = []
        for name, value in criteria.items():
            if value is None:
                continue
            op = self._fields.get(name)
            if op is None or name not in self._columns:
                logger.debug("Ignoring non-filterable field %s.%s", self._model.__name__, name)
                continue

            column = getattr(self._model, name)
            if op is FilterOp.RANGE:
                bounds = value if isinstance(value, Mapping) else {"gte": value, "lte": value}
                if bounds.get("gte") is not None:
                    clauses.append(column >= bounds["gte"])
                if bounds.get("lte") is not None:
                    clauses.append(column <= bounds["lte"])
            elif op is FilterOp.PREFIX:
                clauses.append(column.istartswith(str(value), autoescape=True))
            else:
                clauses.append(column == value)
        return clauses

    def order_by(self, sort: Sequence[SortOrder]) -> list[ColumnElement[Any]]:
        requested = [(to_snake(s.field), s.direction) for s in sort]
        known = [(name, d) for name, d in requested if name in self._columns]
        if len(known) < len(requested):
            logger.debug("Ignoring unknown sort fields on %s: %s", self._model.__name__, requested)

        clauses = []
        for name, direction in known or self._default_sort:
            column = getattr(self._model, name)
            clauses.append(column.desc() if direction == "desc" else column.asc())
        # id keeps page boundaries stable when the requested keys tie
        clauses.append(getattr(self._model, "id").asc())
        return clauses

    def query(
        self,
        criteria: Mapping[str, Any],
        scope: Optional[Mapping[str, Any]] = None,
    ) -> Select:
        q = select(self._model)
        for name, value in (scope or {}).items():
            q = q.where(getattr(self._model, name) == value)
        for clause in self.predicates(criteria):
            q = q.where(clause)
        return q

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def filter(
        self,
        request: FilterRequest[Any],
        scope: Optional[Mapping[str, Any]] = None,
    ) -> PaginationResponse[DtoT]:
        """Return the requested page; an out-of-range page is empty, never an error."""
        page = request.pagination
        q = self.query(criteria_of(request.filters), scope)

        count_q = select(func.count()).select_from(q.subquery())
        total = (await self._session.execute(count_q)).scalar_one()

        rows: Sequence[ModelT] = []
        if page.offset < total:
            q = q.order_by(*self.order_by(page.sort)).offset(page.offset).limit(page.page_size)
            rows = (await self._session.execute(q)).scalars().all()

        return PaginationResponse.of(
            [self._to_dto(row) for row in rows], total, page.page_number, page.page_size
        )

"""Pagination request/response models shared by every /filter endpoint."""

from __future__ import annotations

import math
from typing import Generic, TypeVar

from pydantic import Field, field_validator

from distributor_mgmt.core.config import settings
from distributor_mgmt.schemas.common import CamelModel

T = TypeVar("T")


class SortOrder(CamelModel):
    field: str
    direction: str = "asc"

    @field_validator("direction")
    @classmethod
    def _normalize_direction(cls, value: str) -> str:
        value = value.lower()
        if value not in ("asc", "desc"):
            raise ValueError("direction must be 'asc' or 'desc'")
        return value

    @property
    def descending(self) -> bool:
        return self.direction == "desc"


class PaginationRequest(CamelModel):
    """`{"pageNumber": 0, "pageSize": 20, "sort": [{"field": "name", "direction": "asc"}]}`"""

    page_number: int = Field(default=0, ge=0, description="Page index (0-based)")
    page_size: int = Field(
        default=settings.default_page_size,
        ge=1,
        le=settings.max_page_size,
        description="Items per page",
    )
    sort: list[SortOrder] = Field(default_factory=list)

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


class PaginationResponse(CamelModel, Generic[T]):
    """Paginated envelope: `{content, totalElements, totalPages, page, size}`."""

    content: list[T]
    total_elements: int
    total_pages: int
    page: int
    size: int

    @classmethod
    def of(cls, content: list[T], total: int, page: int, size: int) -> "PaginationResponse[T]":
        return cls(
            content=content,
            total_elements=total,
            total_pages=math.ceil(total / size) if size else 1,
            page=page,
            size=size,
        )

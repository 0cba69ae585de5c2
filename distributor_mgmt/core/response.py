"""`{ data: ... }` envelope for single items and plain lists.

POST /filter endpoints return ``PaginationResponse`` (core.pagination) as is.
"""

from typing import Any, Generic, TypeVar

from distributor_mgmt.schemas.common import CamelModel

T = TypeVar("T")


class DataResponse(CamelModel, Generic[T]):
    data: T


def wrap(data: Any) -> dict[str, Any]:
    return {"data": data}

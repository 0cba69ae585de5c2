"""Uniform CRUD + /filter endpoints for one entity.

Every resource exposes the same shape:

    POST   {prefix}            create        → 201 {data}
    POST   {prefix}/filter     filter        → PaginationResponse
    GET    {prefix}/{id}       get           → {data} | 404
    PUT    {prefix}/{id}       update        → {data}
    DELETE {prefix}/{id}       delete        → 204

Call register_crud_routes() at the END of a router module so entity-specific
routes such as /active are matched before /{id}.
"""

from collections.abc import Callable

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.core.filtering import FilterRequest
from distributor_mgmt.core.pagination import PaginationResponse
from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.routers.v1.deps import current_actor, no_scope
from distributor_mgmt.services.base import EntityService


def register_crud_routes(
    router: APIRouter,
    *,
    service_class: type[EntityService],
    create_schema: type,
    update_schema: type,
    out_schema: type,
    filter_schema: type,
    scope: Callable = no_scope,
) -> None:
    name = service_class.entity_name

    @router.post(
        "",
        response_model=DataResponse[out_schema],
        status_code=status.HTTP_201_CREATED,
        name=f"create_{name}",
        summary=f"Create {name}",
    )
    async def create(
        body: create_schema,
        scope_values: dict | None = Depends(scope),
        actor: str | None = Depends(current_actor),
        session: AsyncSession = Depends(get_db),
    ):
        return wrap(await service_class(session).create(body, actor, scope_values))

    @router.post(
        "/filter",
        response_model=PaginationResponse[out_schema],
        name=f"filter_{name}",
        summary=f"Filter {name} (paginated)",
    )
    async def filter_entities(
        body: FilterRequest[filter_schema],
        scope_values: dict | None = Depends(scope),
        session: AsyncSession = Depends(get_db),
    ):
        return await service_class(session).filter(body, scope_values)

    @router.get(
        "/{entity_id}",
        response_model=DataResponse[out_schema],
        name=f"get_{name}",
        summary=f"Get {name} by id",
    )
    async def get(
        entity_id: str,
        scope_values: dict | None = Depends(scope),
        session: AsyncSession = Depends(get_db),
    ):
        found = await service_class(session).get(entity_id, scope_values)
        if found is None:
            raise NotFoundError(name, entity_id)
        return wrap(found)

    @router.put(
        "/{entity_id}",
        response_model=DataResponse[out_schema],
        name=f"update_{name}",
        summary=f"Update {name}",
    )
    async def update(
        entity_id: str,
        body: update_schema,
        scope_values: dict | None = Depends(scope),
        actor: str | None = Depends(current_actor),
        session: AsyncSession = Depends(get_db),
    ):
        return wrap(await service_class(session).update(entity_id, body, actor, scope_values))

    @router.delete(
        "/{entity_id}",
        status_code=status.HTTP_204_NO_CONTENT,
        name=f"delete_{name}",
        summary=f"Delete {name}",
    )
    async def delete(
        entity_id: str,
        scope_values: dict | None = Depends(scope),
        session: AsyncSession = Depends(get_db),
    ):
        await service_class(session).delete(entity_id, scope_values)

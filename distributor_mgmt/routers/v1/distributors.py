"""Distributor, branding, operation and simulation routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Entity-specific endpoints first (they must be matched before /{entity_id})
  3. register_crud_routes() last
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import current_actor, distributor_scope
from distributor_mgmt.schemas.distributor import (
    CanOperateResponse,
    DistributorBrandingCreate,
    DistributorBrandingFilter,
    DistributorBrandingOut,
    DistributorBrandingUpdate,
    DistributorCreate,
    DistributorFilter,
    DistributorOperationCreate,
    DistributorOperationFilter,
    DistributorOperationOut,
    DistributorOperationUpdate,
    DistributorOut,
    DistributorSimulationCreate,
    DistributorSimulationFilter,
    DistributorSimulationOut,
    DistributorSimulationUpdate,
    DistributorUpdate,
)
from distributor_mgmt.services.distributor import (
    DistributorBrandingService,
    DistributorOperationService,
    DistributorService,
    DistributorSimulationService,
)

router = APIRouter(prefix="/distributors", tags=["Distributors"])
branding_router = APIRouter(prefix="/distributors/{distributor_id}/branding", tags=["Distributor Branding"])
operations_router = APIRouter(prefix="/distributors/{distributor_id}/operations", tags=["Distributor Operations"])
operations_lookup_router = APIRouter(prefix="/distributor-operations", tags=["Distributor Operations"])
simulations_router = APIRouter(prefix="/distributors/{distributor_id}/simulations", tags=["Distributor Simulations"])
simulations_lookup_router = APIRouter(prefix="/distributor-simulations", tags=["Distributor Simulations"])


# ------------------------------------------------------------------
# Distributors
# ------------------------------------------------------------------

@router.post("/{entity_id}/activate", response_model=DataResponse[DistributorOut])
async def activate_distributor(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await DistributorService(session).activate(entity_id, actor))


@router.post("/{entity_id}/deactivate", response_model=DataResponse[DistributorOut])
async def deactivate_distributor(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await DistributorService(session).deactivate(entity_id, actor))


register_crud_routes(
    router,
    service_class=DistributorService,
    create_schema=DistributorCreate,
    update_schema=DistributorUpdate,
    out_schema=DistributorOut,
    filter_schema=DistributorFilter,
)


# ------------------------------------------------------------------
# Branding
# ------------------------------------------------------------------

register_crud_routes(
    branding_router,
    service_class=DistributorBrandingService,
    create_schema=DistributorBrandingCreate,
    update_schema=DistributorBrandingUpdate,
    out_schema=DistributorBrandingOut,
    filter_schema=DistributorBrandingFilter,
    scope=distributor_scope,
)


# ------------------------------------------------------------------
# Operations
# ------------------------------------------------------------------

@operations_router.get("", response_model=DataResponse[list[DistributorOperationOut]])
async def list_operations(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorOperationService(session).list_for_distributor(distributor_id))


@operations_router.get("/active", response_model=DataResponse[list[DistributorOperationOut]])
async def list_active_operations(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorOperationService(session).list_active(distributor_id))


@operations_router.get("/can-operate", response_model=DataResponse[CanOperateResponse])
async def can_operate(
    distributor_id: str,
    country_id: str = Query(alias="countryId"),
    administrative_division_id: Optional[str] = Query(default=None, alias="administrativeDivisionId"),
    session: AsyncSession = Depends(get_db),
):
    """Whether the distributor has an active operation for this country/division."""
    allowed = await DistributorOperationService(session).can_operate(
        distributor_id, country_id, administrative_division_id
    )
    return wrap(
        CanOperateResponse(
            distributor_id=distributor_id,
            country_id=country_id,
            administrative_division_id=administrative_division_id,
            can_operate=allowed,
        )
    )


@operations_router.post("/{entity_id}/activate", response_model=DataResponse[DistributorOperationOut])
async def activate_operation(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorOperationService(session).activate(entity_id, actor, distributor_scope(distributor_id))
    )


@operations_router.post("/{entity_id}/deactivate", response_model=DataResponse[DistributorOperationOut])
async def deactivate_operation(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorOperationService(session).deactivate(entity_id, actor, distributor_scope(distributor_id))
    )


register_crud_routes(
    operations_router,
    service_class=DistributorOperationService,
    create_schema=DistributorOperationCreate,
    update_schema=DistributorOperationUpdate,
    out_schema=DistributorOperationOut,
    filter_schema=DistributorOperationFilter,
    scope=distributor_scope,
)


@operations_lookup_router.get(
    "/by-country/{country_id}", response_model=DataResponse[list[DistributorOperationOut]]
)
async def list_operations_by_country(country_id: str, session: AsyncSession = Depends(get_db)):
    """Operations of every distributor in a country."""
    return wrap(await DistributorOperationService(session).list_by_country(country_id))


@operations_lookup_router.get(
    "/by-administrative-division/{administrative_division_id}",
    response_model=DataResponse[list[DistributorOperationOut]],
)
async def list_operations_by_division(
    administrative_division_id: str, session: AsyncSession = Depends(get_db)
):
    return wrap(
        await DistributorOperationService(session).list_by_administrative_division(
            administrative_division_id
        )
    )


# ------------------------------------------------------------------
# Simulations
# ------------------------------------------------------------------

@simulations_router.get("/active", response_model=DataResponse[list[DistributorSimulationOut]])
async def list_active_simulations(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorSimulationService(session).list_active(distributor_id))


@simulations_router.get("/by-status/{simulation_status}", response_model=DataResponse[list[DistributorSimulationOut]])
async def list_simulations_by_status(
    distributor_id: str, simulation_status: str, session: AsyncSession = Depends(get_db)
):
    return wrap(await DistributorSimulationService(session).list_by_status(distributor_id, simulation_status))


@simulations_router.patch("/{entity_id}/status", response_model=DataResponse[DistributorSimulationOut])
async def update_simulation_status(
    distributor_id: str,
    entity_id: str,
    simulation_status: str = Query(alias="status"),
    updated_by: Optional[str] = Query(default=None, alias="updatedBy"),
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorSimulationService(session).update_status(
            entity_id, simulation_status, updated_by or actor, distributor_scope(distributor_id)
        )
    )


@simulations_router.post("/{entity_id}/activate", response_model=DataResponse[DistributorSimulationOut])
async def activate_simulation(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorSimulationService(session).activate(entity_id, actor, distributor_scope(distributor_id))
    )


@simulations_router.post("/{entity_id}/deactivate", response_model=DataResponse[DistributorSimulationOut])
async def deactivate_simulation(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorSimulationService(session).deactivate(entity_id, actor, distributor_scope(distributor_id))
    )


register_crud_routes(
    simulations_router,
    service_class=DistributorSimulationService,
    create_schema=DistributorSimulationCreate,
    update_schema=DistributorSimulationUpdate,
    out_schema=DistributorSimulationOut,
    filter_schema=DistributorSimulationFilter,
    scope=distributor_scope,
)


@simulations_lookup_router.get(
    "/by-application/{application_id}", response_model=DataResponse[list[DistributorSimulationOut]]
)
async def list_simulations_by_application(application_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorSimulationService(session).list_by_application(application_id))

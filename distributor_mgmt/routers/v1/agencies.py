"""Agency, agent, assignment and agency payment-method routers."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import agency_scope, current_actor, distributor_scope
from distributor_mgmt.schemas.agency import (
    AgencyPaymentMethodCreate,
    AgencyPaymentMethodFilter,
    AgencyPaymentMethodOut,
    AgencyPaymentMethodUpdate,
    DistributorAgencyCreate,
    DistributorAgencyFilter,
    DistributorAgencyOut,
    DistributorAgencyUpdate,
    DistributorAgentAgencyCreate,
    DistributorAgentAgencyFilter,
    DistributorAgentAgencyOut,
    DistributorAgentAgencyUpdate,
    DistributorAgentCreate,
    DistributorAgentFilter,
    DistributorAgentOut,
    DistributorAgentUpdate,
)
from distributor_mgmt.services.agency import (
    AgencyPaymentMethodService,
    DistributorAgencyService,
    DistributorAgentAgencyService,
    DistributorAgentService,
)

agencies_router = APIRouter(prefix="/distributors/{distributor_id}/agencies", tags=["Distributor Agencies"])
agents_router = APIRouter(prefix="/distributors/{distributor_id}/agents", tags=["Distributor Agents"])
assignments_router = APIRouter(
    prefix="/distributors/{distributor_id}/agent-assignments", tags=["Distributor Agent Assignments"]
)
payment_methods_router = APIRouter(
    prefix="/agencies/{agency_id}/payment-methods", tags=["Agency Payment Methods"]
)


register_crud_routes(
    agencies_router,
    service_class=DistributorAgencyService,
    create_schema=DistributorAgencyCreate,
    update_schema=DistributorAgencyUpdate,
    out_schema=DistributorAgencyOut,
    filter_schema=DistributorAgencyFilter,
    scope=distributor_scope,
)

register_crud_routes(
    agents_router,
    service_class=DistributorAgentService,
    create_schema=DistributorAgentCreate,
    update_schema=DistributorAgentUpdate,
    out_schema=DistributorAgentOut,
    filter_schema=DistributorAgentFilter,
    scope=distributor_scope,
)

register_crud_routes(
    assignments_router,
    service_class=DistributorAgentAgencyService,
    create_schema=DistributorAgentAgencyCreate,
    update_schema=DistributorAgentAgencyUpdate,
    out_schema=DistributorAgentAgencyOut,
    filter_schema=DistributorAgentAgencyFilter,
    scope=distributor_scope,
)


# ------------------------------------------------------------------
# Payment methods
# ------------------------------------------------------------------

@payment_methods_router.get("/primary", response_model=DataResponse[AgencyPaymentMethodOut])
async def get_primary_payment_method(agency_id: str, session: AsyncSession = Depends(get_db)):
    found = await AgencyPaymentMethodService(session).primary_for_agency(agency_id)
    if found is None:
        raise NotFoundError("Primary AgencyPaymentMethod for agency", agency_id)
    return wrap(found)


@payment_methods_router.post("/{entity_id}/set-primary", response_model=DataResponse[AgencyPaymentMethodOut])
async def set_primary_payment_method(
    agency_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    """Make this the agency's only primary payment method."""
    return wrap(await AgencyPaymentMethodService(session).set_primary(entity_id, actor, agency_scope(agency_id)))


@payment_methods_router.post("/{entity_id}/verify", response_model=DataResponse[AgencyPaymentMethodOut])
async def verify_payment_method(
    agency_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await AgencyPaymentMethodService(session).verify(entity_id, actor, agency_scope(agency_id)))


register_crud_routes(
    payment_methods_router,
    service_class=AgencyPaymentMethodService,
    create_schema=AgencyPaymentMethodCreate,
    update_schema=AgencyPaymentMethodUpdate,
    out_schema=AgencyPaymentMethodOut,
    filter_schema=AgencyPaymentMethodFilter,
    scope=agency_scope,
)

"""Leasing contract, lending contract and shipment routers."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.domain.enums import ShipmentStatus
from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import current_actor
from distributor_mgmt.schemas.contract import (
    LeasingApprovalOut,
    LeasingContractCreate,
    LeasingContractFilter,
    LeasingContractOut,
    LeasingContractUpdate,
    LendingApprovalOut,
    LendingContractCreate,
    LendingContractFilter,
    LendingContractOut,
    LendingContractUpdate,
    ShipmentCreate,
    ShipmentFilter,
    ShipmentOut,
    ShipmentUpdate,
)
from distributor_mgmt.services.contract import (
    LeasingContractService,
    LendingContractService,
    ShipmentService,
)

leasing_router = APIRouter(prefix="/leasing-contracts", tags=["Leasing Contracts"])
lending_router = APIRouter(prefix="/lending-contracts", tags=["Lending Contracts"])
shipments_router = APIRouter(prefix="/shipments", tags=["Shipments"])


def register_contract_routes(
    router: APIRouter,
    *,
    service_class: type[LeasingContractService] | type[LendingContractService],
    out_schema: type,
    approval_schema: type,
) -> None:
    """Lookups and approval shared by both kinds of contract; call before register_crud_routes."""
    name = service_class.entity_name

    @router.get("/by-contract/{contract_id}", response_model=DataResponse[out_schema], name=f"get_{name}_by_contract")
    async def get_by_contract_id(contract_id: str, session: AsyncSession = Depends(get_db)):
        found = await service_class(session).get_by_contract_id(contract_id)
        if found is None:
            raise NotFoundError(name, contract_id)
        return wrap(found)

    @router.get(
        "/by-distributor/{distributor_id}",
        response_model=DataResponse[list[out_schema]],
        name=f"list_{name}_by_distributor",
    )
    async def list_by_distributor(distributor_id: str, session: AsyncSession = Depends(get_db)):
        return wrap(await service_class(session).list_by_distributor(distributor_id))

    @router.get(
        "/by-product/{product_id}", response_model=DataResponse[list[out_schema]], name=f"list_{name}_by_product"
    )
    async def list_by_product(product_id: str, session: AsyncSession = Depends(get_db)):
        return wrap(await service_class(session).list_by_product(product_id))

    @router.get("/by-party/{party_id}", response_model=DataResponse[list[out_schema]], name=f"list_{name}_by_party")
    async def list_by_party(party_id: str, session: AsyncSession = Depends(get_db)):
        return wrap(await service_class(session).list_by_party(party_id))

    @router.get(
        "/by-status/{contract_status}", response_model=DataResponse[list[out_schema]], name=f"list_{name}_by_status"
    )
    async def list_by_status(contract_status: str, session: AsyncSession = Depends(get_db)):
        return wrap(await service_class(session).list_by_status(contract_status))

    @router.post("/{entity_id}/approve", response_model=DataResponse[approval_schema], name=f"approve_{name}")
    async def approve_contract(
        entity_id: str,
        approved_by: Optional[str] = Query(default=None, alias="approvedBy"),
        actor: Optional[str] = Depends(current_actor),
        session: AsyncSession = Depends(get_db),
    ):
        """Approve the contract and open a PENDING shipment for its product."""
        return wrap(await service_class(session).approve(entity_id, approved_by or actor))


# ------------------------------------------------------------------
# Leasing contracts
# ------------------------------------------------------------------

register_contract_routes(
    leasing_router,
    service_class=LeasingContractService,
    out_schema=LeasingContractOut,
    approval_schema=LeasingApprovalOut,
)

register_crud_routes(
    leasing_router,
    service_class=LeasingContractService,
    create_schema=LeasingContractCreate,
    update_schema=LeasingContractUpdate,
    out_schema=LeasingContractOut,
    filter_schema=LeasingContractFilter,
)


# ------------------------------------------------------------------
# Lending contracts
# ------------------------------------------------------------------

@lending_router.get("/by-agency/{agency_id}", response_model=DataResponse[list[LendingContractOut]])
async def list_lending_by_agency(agency_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingContractService(session).list_by_agency(agency_id))


@lending_router.get("/by-agent/{agent_id}", response_model=DataResponse[list[LendingContractOut]])
async def list_lending_by_agent(agent_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingContractService(session).list_by_originating_agent(agent_id))


register_contract_routes(
    lending_router,
    service_class=LendingContractService,
    out_schema=LendingContractOut,
    approval_schema=LendingApprovalOut,
)

register_crud_routes(
    lending_router,
    service_class=LendingContractService,
    create_schema=LendingContractCreate,
    update_schema=LendingContractUpdate,
    out_schema=LendingContractOut,
    filter_schema=LendingContractFilter,
)


# ------------------------------------------------------------------
# Shipments
# ------------------------------------------------------------------

@shipments_router.get("/by-tracking-number/{tracking_number}", response_model=DataResponse[ShipmentOut])
async def get_by_tracking_number(tracking_number: str, session: AsyncSession = Depends(get_db)):
    found = await ShipmentService(session).get_by_tracking_number(tracking_number)
    if found is None:
        raise NotFoundError("Shipment", tracking_number)
    return wrap(found)


@shipments_router.get(
    "/by-leasing-contract/{leasing_contract_id}", response_model=DataResponse[list[ShipmentOut]]
)
async def list_by_leasing_contract(leasing_contract_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ShipmentService(session).list_by_leasing_contract(leasing_contract_id))


@shipments_router.get(
    "/by-lending-contract/{lending_contract_id}", response_model=DataResponse[list[ShipmentOut]]
)
async def list_by_lending_contract(lending_contract_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ShipmentService(session).list_by_lending_contract(lending_contract_id))


@shipments_router.get("/by-product/{product_id}", response_model=DataResponse[list[ShipmentOut]])
async def list_shipments_by_product(product_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ShipmentService(session).list_by_product(product_id))


@shipments_router.get("/by-status/{shipment_status}", response_model=DataResponse[list[ShipmentOut]])
async def list_shipments_by_status(shipment_status: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ShipmentService(session).list_by_status(shipment_status))


@shipments_router.patch("/{entity_id}/status", response_model=DataResponse[ShipmentOut])
async def update_shipment_status(
    entity_id: str,
    shipment_status: ShipmentStatus = Query(alias="status"),
    updated_by: Optional[str] = Query(default=None, alias="updatedBy"),
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    """SHIPPED and DELIVERED also stamp shipping / delivery dates the first time."""
    return wrap(await ShipmentService(session).update_status(entity_id, shipment_status, updated_by or actor))


register_crud_routes(
    shipments_router,
    service_class=ShipmentService,
    create_schema=ShipmentCreate,
    update_schema=ShipmentUpdate,
    out_schema=ShipmentOut,
    filter_schema=ShipmentFilter,
)

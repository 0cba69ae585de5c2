"""Leasing contract, lending contract and shipment services.

Approving a contract opens a PENDING shipment for the contracted product;
both writes share the request's session and commit together.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.domain.contract import LeasingContract, LendingContract, Shipment
from distributor_mgmt.domain.enums import ContractStatus, ShipmentStatus
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.repositories.base import BaseRepository
from distributor_mgmt.repositories.contract import (
    LeasingContractRepository,
    LendingContractRepository,
    ShipmentRepository,
)
from distributor_mgmt.schemas.common import CamelModel
from distributor_mgmt.schemas.contract import (
    LeasingApprovalOut,
    LeasingContractOut,
    LendingApprovalOut,
    LendingContractOut,
    ShipmentOut,
)
from distributor_mgmt.services.base import EntityService, ModelT, OutT, Scope

logger = logging.getLogger(__name__)

ApprovalT = TypeVar("ApprovalT", bound=CamelModel)


class ShipmentService(EntityService[Shipment, ShipmentOut]):
    entity_name = "Shipment"
    repository_class = ShipmentRepository
    out_schema = ShipmentOut
    defaults = {"status": ShipmentStatus.PENDING.value}

    async def get_by_tracking_number(self, tracking_number: str) -> ShipmentOut | None:
        return await self.find_one_by(tracking_number=tracking_number)

    async def list_by_leasing_contract(self, leasing_contract_id: str) -> list[ShipmentOut]:
        return await self.find_by(leasing_contract_id=leasing_contract_id)

    async def list_by_lending_contract(self, lending_contract_id: str) -> list[ShipmentOut]:
        return await self.find_by(lending_contract_id=lending_contract_id)

    async def list_by_product(self, product_id: str) -> list[ShipmentOut]:
        return await self.find_by(product_id=product_id)

    async def list_by_status(self, status: str) -> list[ShipmentOut]:
        return await self.find_by(status=status)

    async def update_status(
        self,
        shipment_id: str,
        status: ShipmentStatus | str,
        actor: str | None = None,
        scope: Scope = None,
    ) -> ShipmentOut:
        """Set the status; the first SHIPPED / DELIVERED also stamps its date."""
        status = ShipmentStatus(status)
        existing = await self.require(shipment_id, scope)
        changes: dict = {"status": status.value}
        now = utcnow()
        if status is ShipmentStatus.SHIPPED and existing.shipping_date is None:
            changes["shipping_date"] = now
        elif status is ShipmentStatus.DELIVERED and existing.actual_delivery_date is None:
            changes["actual_delivery_date"] = now
        return await self.transition(shipment_id, actor, scope, **changes)


class _ContractService(EntityService[ModelT, OutT], Generic[ModelT, OutT, ApprovalT]):
    """Lookups and approval shared by leasing and lending contracts."""

    defaults = {"is_active": True, "status": ContractStatus.PENDING.value}
    approval_schema: type[ApprovalT]
    # Shipment column that points back at this kind of contract
    shipment_link: str

    def __init__(
        self,
        session: AsyncSession,
        repository: BaseRepository | None = None,
        shipments: ShipmentService | None = None,
    ):
        super().__init__(session, repository)
        self._shipments = shipments if shipments is not None else ShipmentService(session)

    async def get_by_contract_id(self, contract_id: str) -> OutT | None:
        return await self.find_one_by(contract_id=contract_id)

    async def list_by_distributor(self, distributor_id: str) -> list[OutT]:
        return await self.find_by(distributor_id=distributor_id)

    async def list_by_product(self, product_id: str) -> list[OutT]:
        return await self.find_by(product_id=product_id)

    async def list_by_party(self, party_id: str) -> list[OutT]:
        return await self.find_by(party_id=party_id)

    async def list_by_status(self, status: str) -> list[OutT]:
        return await self.find_by(status=status)

    async def approve(self, contract_id: str, approved_by: str | None = None) -> ApprovalT:
        """Mark the contract APPROVED and open a PENDING shipment for it."""
        contract: Any = await self.transition(
            contract_id,
            approved_by,
            status=ContractStatus.APPROVED.value,
            approval_date=utcnow(),
            approved_by=approved_by,
        )
        shipment = await self._shipments.create(
            {self.shipment_link: contract.id, "product_id": contract.product_id},
            actor=approved_by,
        )
        logger.info("%s approved id=%s shipment=%s", self.entity_name, contract.id, shipment.id)
        return self.approval_schema(contract=contract, shipment=shipment)


class LeasingContractService(
    _ContractService[LeasingContract, LeasingContractOut, LeasingApprovalOut]
):
    entity_name = "LeasingContract"
    repository_class = LeasingContractRepository
    out_schema = LeasingContractOut
    approval_schema = LeasingApprovalOut
    shipment_link = "leasing_contract_id"


class LendingContractService(
    _ContractService[LendingContract, LendingContractOut, LendingApprovalOut]
):
    entity_name = "LendingContract"
    repository_class = LendingContractRepository
    out_schema = LendingContractOut
    approval_schema = LendingApprovalOut
    shipment_link = "lending_contract_id"

    async def list_by_agency(self, agency_id: str) -> list[LendingContractOut]:
        return await self.find_by(agency_id=agency_id)

    async def list_by_originating_agent(self, agent_id: str) -> list[LendingContractOut]:
        return await self.find_by(originating_agent_id=agent_id)

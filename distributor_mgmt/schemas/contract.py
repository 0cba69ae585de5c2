"""Leasing contract, lending contract and shipment schemas."""

from datetime import date, datetime
from decimal import Decimal

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


# ---------------------------------------------------------------------------
# Leasing contracts
# ---------------------------------------------------------------------------

class LeasingContractCreate(CamelModel):
    contract_id: str | None = None
    party_id: str | None = None
    distributor_id: str
    product_id: str
    lending_configuration_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    monthly_payment: Decimal | None = None
    down_payment: Decimal | None = None
    total_amount: Decimal | None = None
    status: str | None = None
    approval_date: datetime | None = None
    approved_by: str | None = None
    terms_conditions: str | None = None
    notes: str | None = None
    is_active: bool | None = None


class LeasingContractUpdate(LeasingContractCreate):
    lock_version: int | None = None


class LeasingContractOut(AuditedOut, LeasingContractCreate):
    pass


class LeasingContractFilter(CamelModel):
    contract_id: str | None = None
    party_id: str | None = None
    distributor_id: str | None = None
    product_id: str | None = None
    status: str | None = None
    is_active: bool | None = None
    start_date: Range[date] | None = None
    end_date: Range[date] | None = None
    total_amount: Range[Decimal] | None = None


# ---------------------------------------------------------------------------
# Lending contracts
# ---------------------------------------------------------------------------

class LendingContractCreate(LeasingContractCreate):
    originating_agent_id: str | None = None
    agency_id: str | None = None


class LendingContractUpdate(LendingContractCreate):
    lock_version: int | None = None


class LendingContractOut(AuditedOut, LendingContractCreate):
    pass


class LendingContractFilter(LeasingContractFilter):
    originating_agent_id: str | None = None
    agency_id: str | None = None
    approval_date: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Shipments
# ---------------------------------------------------------------------------

class ShipmentCreate(CamelModel):
    leasing_contract_id: str | None = None
    lending_contract_id: str | None = None
    product_id: str | None = None
    tracking_number: str | None = None
    carrier: str | None = None
    shipping_address: str | None = None
    shipping_date: datetime | None = None
    estimated_delivery_date: datetime | None = None
    actual_delivery_date: datetime | None = None
    status: str | None = None
    notes: str | None = None


class ShipmentUpdate(ShipmentCreate):
    lock_version: int | None = None


class ShipmentOut(AuditedOut, ShipmentCreate):
    pass


class ShipmentFilter(CamelModel):
    tracking_number: str | None = None
    carrier: str | None = None
    leasing_contract_id: str | None = None
    lending_contract_id: str | None = None
    product_id: str | None = None
    status: str | None = None
    shipping_date: Range[datetime] | None = None
    estimated_delivery_date: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Approval
# ---------------------------------------------------------------------------

class LeasingApprovalOut(CamelModel):
    """Result of approving a contract: the contract and the shipment it opened."""

    contract: LeasingContractOut
    shipment: ShipmentOut


class LendingApprovalOut(CamelModel):
    contract: LendingContractOut
    shipment: ShipmentOut

"""Repositories for leasing and lending contracts and shipments."""

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.contract import LeasingContract, LendingContract, Shipment
from distributor_mgmt.repositories.base import BaseRepository

_CONTRACT_FILTERS = {
    "contract_id": FilterOp.EQ,
    "party_id": FilterOp.EQ,
    "distributor_id": FilterOp.EQ,
    "product_id": FilterOp.EQ,
    "status": FilterOp.EQ,
    "is_active": FilterOp.EQ,
    "start_date": FilterOp.RANGE,
    "end_date": FilterOp.RANGE,
    "total_amount": FilterOp.RANGE,
}


class LeasingContractRepository(BaseRepository[LeasingContract]):
    model = LeasingContract
    filter_fields = dict(_CONTRACT_FILTERS)


class LendingContractRepository(BaseRepository[LendingContract]):
    model = LendingContract
    filter_fields = {
        **_CONTRACT_FILTERS,
        "originating_agent_id": FilterOp.EQ,
        "agency_id": FilterOp.EQ,
        "approval_date": FilterOp.RANGE,
    }


class ShipmentRepository(BaseRepository[Shipment]):
    model = Shipment
    filter_fields = {
        "tracking_number": FilterOp.EQ,
        "carrier": FilterOp.EQ,
        "leasing_contract_id": FilterOp.EQ,
        "lending_contract_id": FilterOp.EQ,
        "product_id": FilterOp.EQ,
        "status": FilterOp.EQ,
        "shipping_date": FilterOp.RANGE,
        "estimated_delivery_date": FilterOp.RANGE,
    }

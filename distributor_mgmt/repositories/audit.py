"""Repository for the distributor audit log."""

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.audit import DistributorAuditLog
from distributor_mgmt.repositories.base import BaseRepository


class DistributorAuditLogRepository(BaseRepository[DistributorAuditLog]):
    model = DistributorAuditLog
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "user_id": FilterOp.EQ,
        "action": FilterOp.EQ,
        "entity": FilterOp.EQ,
        "entity_id": FilterOp.EQ,
        "ip_address": FilterOp.EQ,
        "timestamp": FilterOp.RANGE,
    }
    default_sort = (("timestamp", "desc"),)

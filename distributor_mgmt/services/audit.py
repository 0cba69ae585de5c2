"""Distributor audit-log service."""

from distributor_mgmt.domain.audit import DistributorAuditLog
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.repositories.audit import DistributorAuditLogRepository
from distributor_mgmt.schemas.audit import DistributorAuditLogOut
from distributor_mgmt.services.base import EntityService


class DistributorAuditLogService(EntityService[DistributorAuditLog, DistributorAuditLogOut]):
    """Audit rows carry no lock_version or update-audit pair; writes are plain."""

    entity_name = "DistributorAuditLog"
    repository_class = DistributorAuditLogRepository
    out_schema = DistributorAuditLogOut
    defaults = {"timestamp": utcnow}
    scope_fields = ("distributor_id",)

    async def _before_write(self, values, existing, actor) -> None:
        if existing is not None and values.get("timestamp") is None:
            values["timestamp"] = existing.timestamp

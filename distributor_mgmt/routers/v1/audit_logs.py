"""Distributor audit-log router."""

from fastapi import APIRouter

from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import distributor_scope
from distributor_mgmt.schemas.audit import (
    DistributorAuditLogCreate,
    DistributorAuditLogFilter,
    DistributorAuditLogOut,
    DistributorAuditLogUpdate,
)
from distributor_mgmt.services.audit import DistributorAuditLogService

router = APIRouter(prefix="/distributors/{distributor_id}/audit-logs", tags=["Distributor Audit Logs"])

register_crud_routes(
    router,
    service_class=DistributorAuditLogService,
    create_schema=DistributorAuditLogCreate,
    update_schema=DistributorAuditLogUpdate,
    out_schema=DistributorAuditLogOut,
    filter_schema=DistributorAuditLogFilter,
    scope=distributor_scope,
)

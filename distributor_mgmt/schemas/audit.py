"""Distributor audit-log schemas."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.domain.enums import DistributorAction
from distributor_mgmt.schemas.common import CamelModel


class DistributorAuditLogCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    user_id: str | None = None
    ip_address: str | None = None
    action: DistributorAction
    entity: str | None = None
    entity_id: str | None = None
    metadata_json: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("metadata_json", "metadata"),
        serialization_alias="metadata",
    )
    timestamp: datetime | None = None


class DistributorAuditLogUpdate(DistributorAuditLogCreate):
    pass


class DistributorAuditLogOut(DistributorAuditLogCreate):
    id: str
    distributor_id: str
    timestamp: datetime


class DistributorAuditLogFilter(CamelModel):
    user_id: str | None = None
    action: DistributorAction | None = None
    entity: str | None = None
    entity_id: str | None = None
    ip_address: str | None = None
    timestamp: Range[datetime] | None = None

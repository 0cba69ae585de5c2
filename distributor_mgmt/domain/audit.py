"""SQLAlchemy ORM model for the distributor audit log."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.enums import DistributorAction
from distributor_mgmt.domain.mixins import IdMixin, utcnow


class DistributorAuditLog(Base, IdMixin):
    __tablename__ = "distributor_audit_log"

    # Who
    distributor_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    user_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    ip_address: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)

    # What
    action: Mapped[DistributorAction] = mapped_column(
        Enum(DistributorAction, native_enum=False, length=20), nullable=False, index=True
    )
    entity: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    entity_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_json: Mapped[Optional[dict[str, Any]]] = mapped_column(
        "metadata", JSON(none_as_null=True), nullable=True
    )

    # When (audit rows carry no created_by or updated_* pair)
    timestamp: Mapped[datetime] = mapped_column(
        DateTime, default=utcnow, nullable=False, index=True
    )

"""SQLAlchemy ORM models for terms-and-conditions templates and distributor terms."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class TermsAndConditionsTemplate(Base, IdMixin, AuditMixin):
    __tablename__ = "terms_and_conditions_template"

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # GENERAL | LENDING | OPERATIONAL | COMPLIANCE
    category: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    # Body with {{placeholders}}, e.g. {{distributorName}}, {{effectiveDate}}
    template_content: Mapped[str] = mapped_column(Text, nullable=False)
    # {"distributorName": {"type": "string", "required": true}, ...}
    variables: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON(none_as_null=True), nullable=True
    )
    version: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    is_default: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    approval_required: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    auto_renewal: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    renewal_period_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)


class DistributorTermsAndConditions(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_terms_and_conditions"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    template_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("terms_and_conditions_template.id"), index=True, nullable=True
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    version: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    effective_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    expiration_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    signed_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    signed_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    # DRAFT | PENDING_SIGNATURE | SIGNED | EXPIRED | TERMINATED
    status: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

"""SQLAlchemy ORM models for distributors and their per-distributor settings.

Pattern for every domain model in this package:
  - Inherit Base, IdMixin, AuditMixin
  - String UUID primary key, parent keys as plain String(36) foreign keys
  - created_at/created_by/updated_at/updated_by/lock_version from AuditMixin
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.enums import Theme
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class Distributor(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor"

    external_code: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    display_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    tax_id: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    registration_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    website_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    support_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    address_line: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    country_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)

    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_test_distributor: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    time_zone: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    default_locale: Mapped[Optional[str]] = mapped_column(String(16), nullable=True)
    onboarded_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    terminated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)


class DistributorBranding(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_branding"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    logo_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    favicon_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    primary_color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    secondary_color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    background_color: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    font_family: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    theme: Mapped[Optional[Theme]] = mapped_column(
        Enum(Theme, native_enum=False, length=20), nullable=True
    )
    is_default: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class DistributorOperation(Base, IdMixin, AuditMixin):
    """A country / administrative division where a distributor may operate."""

    __tablename__ = "distributor_operation"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    country_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    administrative_division_id: Mapped[Optional[str]] = mapped_column(
        String(36), index=True, nullable=True
    )
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class DistributorSimulation(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_simulation"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    application_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    # PENDING | IN_PROGRESS | COMPLETED | REJECTED (free text)
    simulation_status: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

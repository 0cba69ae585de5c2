"""SQLAlchemy ORM models for distributor agencies, agents and agency payment methods."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class DistributorAgency(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_agency"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    country_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    administrative_division_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    address_line: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    postal_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    is_headquarters: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    opened_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    closed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)


class DistributorAgent(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_agent"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    user_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    employee_code: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(255), index=True, nullable=True)
    phone_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    department: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    job_title: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    hire_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    termination_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class DistributorAgentAgency(Base, IdMixin, AuditMixin):
    """Assignment of an agent to an agency."""

    __tablename__ = "distributor_agent_agency"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    agent_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor_agent.id"), nullable=False, index=True
    )
    agency_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor_agency.id"), nullable=False, index=True
    )
    role_id: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    is_primary_agency: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    assigned_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    unassigned_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)


class AgencyPaymentMethod(Base, IdMixin, AuditMixin):
    __tablename__ = "agency_payment_method"

    agency_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor_agency.id"), nullable=False, index=True
    )
    # BANK_ACCOUNT | DIGITAL_WALLET | WIRE_TRANSFER | CHECK
    payment_method_type: Mapped[str] = mapped_column(String(50), nullable=False)
    payment_provider: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    account_holder_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    account_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    routing_number: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    swift_code: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)
    iban: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    bank_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    currency_code: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)

    wallet_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    wallet_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    wallet_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    is_primary: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_verified: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    verified_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    verified_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_json: Mapped[Optional[dict[str, Any]]] = mapped_column(
        "metadata", JSON(none_as_null=True), nullable=True
    )

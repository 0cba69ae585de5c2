"""SQLAlchemy ORM models for leasing and lending contracts and the shipments they trigger."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class ContractMixin:
    """Columns shared by leasing and lending contracts."""

    contract_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    party_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("product.id"), nullable=False, index=True
    )
    lending_configuration_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("lending_configuration.id"), nullable=True
    )

    start_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    end_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    monthly_payment: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)
    down_payment: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)
    total_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)

    # PENDING | APPROVED | ACTIVE | COMPLETED | CANCELLED
    status: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    approval_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    approved_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    terms_conditions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class LeasingContract(Base, IdMixin, AuditMixin, ContractMixin):
    __tablename__ = "leasing_contract"


class LendingContract(Base, IdMixin, AuditMixin, ContractMixin):
    """A lending contract also records who originated it and through which agency."""

    __tablename__ = "lending_contract"

    originating_agent_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("distributor_agent.id"), index=True, nullable=True
    )
    agency_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("distributor_agency.id"), index=True, nullable=True
    )


class Shipment(Base, IdMixin, AuditMixin):
    __tablename__ = "shipment"

    # Set from whichever kind of contract opened the shipment
    leasing_contract_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("leasing_contract.id"), index=True, nullable=True
    )
    lending_contract_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("lending_contract.id"), index=True, nullable=True
    )
    product_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("product.id"), index=True, nullable=True
    )
    tracking_number: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    carrier: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    shipping_address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    shipping_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    estimated_delivery_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    actual_delivery_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    # PENDING | SHIPPED | IN_TRANSIT | DELIVERED | RETURNED | CANCELLED
    status: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

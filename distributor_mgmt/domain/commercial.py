"""SQLAlchemy ORM models for a distributor's commercial footprint.

  DistributorAuthorizedTerritory  where the distributor is licensed to sell
  DistributorContract             the framework agreement with the distributor
  DistributorProductCatalog       how a product is listed in the distributor's catalog
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, Date, DateTime, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class DistributorAuthorizedTerritory(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_authorized_territory"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    country_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    administrative_division_id: Mapped[Optional[str]] = mapped_column(
        String(36), index=True, nullable=True
    )
    # COUNTRY | REGION | CITY
    authorization_level: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    authorized_from: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    authorized_until: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)


class DistributorContract(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_contract"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    contract_number: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    contract_type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # DRAFT | ACTIVE | SUSPENDED | TERMINATED | EXPIRED (free text)
    status: Mapped[Optional[str]] = mapped_column(String(50), index=True, nullable=True)

    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    renewal_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    notice_period_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    auto_renewal: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

    contract_value: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)
    currency_code: Mapped[Optional[str]] = mapped_column(String(3), nullable=True)
    payment_terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    special_terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    financial_conditions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    product_conditions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    service_level_agreements: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_json: Mapped[Optional[dict[str, Any]]] = mapped_column(
        "metadata", JSON(none_as_null=True), nullable=True
    )

    signed_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    signed_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    approved_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    approved_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    terminated_date: Mapped[Optional[date]] = mapped_column(Date, nullable=True)
    terminated_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    termination_reason: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class DistributorProductCatalog(Base, IdMixin, AuditMixin):
    __tablename__ = "distributor_product_catalog"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("product.id"), nullable=False, index=True
    )
    catalog_code: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    display_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    custom_description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_featured: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    availability_start_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    availability_end_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    display_order: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    max_quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    shipping_available: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    shipping_cost: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)
    shipping_time_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    special_conditions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    metadata_json: Mapped[Optional[dict[str, Any]]] = mapped_column(
        "metadata", JSON(none_as_null=True), nullable=True
    )
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)

"""SQLAlchemy ORM models for the product catalogue and lending configuration."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, ForeignKey, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from distributor_mgmt.db.base import Base
from distributor_mgmt.domain.mixins import AuditMixin, IdMixin


class ProductCategory(Base, IdMixin, AuditMixin):
    __tablename__ = "product_category"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class LendingType(Base, IdMixin, AuditMixin):
    __tablename__ = "lending_type"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    code: Mapped[str] = mapped_column(String(50), nullable=False, unique=True, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class Product(Base, IdMixin, AuditMixin):
    __tablename__ = "product"

    distributor_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("distributor.id"), nullable=False, index=True
    )
    category_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("product_category.id"), index=True, nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    sku: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    model_number: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    manufacturer: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    image_url: Mapped[Optional[str]] = mapped_column(String(512), nullable=True)
    # Free-form technical sheet, e.g. {"weight": "1.2kg", "colors": ["red"]}
    specifications: Mapped[Optional[dict[str, Any]]] = mapped_column(
        JSON(none_as_null=True), nullable=True
    )
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)


class LendingConfiguration(Base, IdMixin, AuditMixin):
    __tablename__ = "lending_configuration"

    product_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("product.id"), nullable=False, index=True
    )
    lending_type_id: Mapped[Optional[str]] = mapped_column(
        String(36), ForeignKey("lending_type.id"), index=True, nullable=True
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    min_term_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    max_term_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    default_term_months: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    min_down_payment_percentage: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 4), nullable=True)
    default_down_payment_percentage: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 4), nullable=True)
    interest_rate: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 4), nullable=True)
    processing_fee_percentage: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 4), nullable=True)
    early_termination_fee_percentage: Mapped[Optional[Decimal]] = mapped_column(Numeric(7, 4), nullable=True)
    late_payment_fee_amount: Mapped[Optional[Decimal]] = mapped_column(Numeric(19, 4), nullable=True)
    grace_period_days: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    is_default: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    is_active: Mapped[Optional[bool]] = mapped_column(Boolean, nullable=True)
    terms_conditions: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

"""Product catalogue and lending-configuration schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


# ---------------------------------------------------------------------------
# Reference data: product categories and lending types
# ---------------------------------------------------------------------------

class ProductCategoryCreate(CamelModel):
    name: str
    code: str
    description: str | None = None
    is_active: bool | None = None


class ProductCategoryUpdate(ProductCategoryCreate):
    lock_version: int | None = None


class ProductCategoryOut(AuditedOut, ProductCategoryCreate):
    pass


class ProductCategoryFilter(CamelModel):
    name: str | None = None
    code: str | None = None
    is_active: bool | None = None


class LendingTypeCreate(CamelModel):
    name: str
    code: str
    description: str | None = None
    is_active: bool | None = None


class LendingTypeUpdate(LendingTypeCreate):
    lock_version: int | None = None


class LendingTypeOut(AuditedOut, LendingTypeCreate):
    pass


class LendingTypeFilter(CamelModel):
    name: str | None = None
    code: str | None = None
    is_active: bool | None = None


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

class ProductCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    category_id: str | None = None
    name: str
    description: str | None = None
    sku: str | None = None
    model_number: str | None = None
    manufacturer: str | None = None
    image_url: str | None = None
    specifications: dict[str, Any] | None = None
    is_active: bool | None = None


class ProductUpdate(ProductCreate):
    lock_version: int | None = None


class ProductOut(AuditedOut, ProductCreate):
    distributor_id: str


class ProductFilter(CamelModel):
    name: str | None = None
    sku: str | None = None
    manufacturer: str | None = None
    category_id: str | None = None
    is_active: bool | None = None
    created_at: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Lending configurations
# ---------------------------------------------------------------------------

class LendingConfigurationCreate(CamelModel):
    product_id: str | None = None  # taken from the path
    lending_type_id: str | None = None
    name: str
    description: str | None = None
    min_term_months: int | None = None
    max_term_months: int | None = None
    default_term_months: int | None = None
    min_down_payment_percentage: Decimal | None = None
    default_down_payment_percentage: Decimal | None = None
    interest_rate: Decimal | None = None
    processing_fee_percentage: Decimal | None = None
    early_termination_fee_percentage: Decimal | None = None
    late_payment_fee_amount: Decimal | None = None
    grace_period_days: int | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    terms_conditions: str | None = None


class LendingConfigurationUpdate(LendingConfigurationCreate):
    lock_version: int | None = None


class LendingConfigurationOut(AuditedOut, LendingConfigurationCreate):
    product_id: str


class LendingConfigurationFilter(CamelModel):
    name: str | None = None
    lending_type_id: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    interest_rate: Range[Decimal] | None = None
    min_term_months: Range[int] | None = None
    max_term_months: Range[int] | None = None

"""Authorized territory, distributor contract and product catalog schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, Field

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


def _metadata_field() -> Any:
    # ORM attribute is metadata_json (Base.metadata is taken); the API field is "metadata"
    return Field(
        default=None,
        validation_alias=AliasChoices("metadata_json", "metadata"),
        serialization_alias="metadata",
    )


# ---------------------------------------------------------------------------
# Authorized territories
# ---------------------------------------------------------------------------

class AuthorizedTerritoryCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    country_id: str
    administrative_division_id: str | None = None
    authorization_level: str | None = Field(default=None, max_length=50)
    is_active: bool | None = None
    authorized_from: datetime | None = None
    authorized_until: datetime | None = None
    notes: str | None = Field(default=None, max_length=500)


class AuthorizedTerritoryUpdate(AuthorizedTerritoryCreate):
    lock_version: int | None = None


class AuthorizedTerritoryOut(AuditedOut, AuthorizedTerritoryCreate):
    distributor_id: str


class AuthorizedTerritoryFilter(CamelModel):
    country_id: str | None = None
    administrative_division_id: str | None = None
    authorization_level: str | None = None
    is_active: bool | None = None
    authorized_from: Range[datetime] | None = None
    authorized_until: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Distributor contracts
# ---------------------------------------------------------------------------

class DistributorContractCreate(CamelModel):
    distributor_id: str | None = None
    contract_number: str = Field(min_length=1)
    contract_type: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: str | None = None
    status: str | None = None
    start_date: date
    end_date: date
    renewal_date: date | None = None
    notice_period_days: int | None = None
    auto_renewal: bool | None = None
    contract_value: Decimal | None = None
    currency_code: str | None = None
    payment_terms: str | None = None
    special_terms: str | None = None
    financial_conditions: str | None = None
    product_conditions: str | None = None
    service_level_agreements: str | None = None
    metadata_json: dict[str, Any] | None = _metadata_field()
    signed_date: date | None = None
    signed_by: str | None = None
    approved_date: date | None = None
    approved_by: str | None = None
    terminated_date: date | None = None
    terminated_by: str | None = None
    termination_reason: str | None = None
    is_active: bool | None = None


class DistributorContractUpdate(DistributorContractCreate):
    lock_version: int | None = None


class DistributorContractOut(AuditedOut, DistributorContractCreate):
    distributor_id: str


class DistributorContractFilter(CamelModel):
    contract_number: str | None = None
    contract_type: str | None = None
    title: str | None = None
    status: str | None = None
    auto_renewal: bool | None = None
    currency_code: str | None = None
    is_active: bool | None = None
    start_date: Range[date] | None = None
    end_date: Range[date] | None = None
    contract_value: Range[Decimal] | None = None


# ---------------------------------------------------------------------------
# Product catalog
# ---------------------------------------------------------------------------

class ProductCatalogCreate(CamelModel):
    distributor_id: str | None = None
    product_id: str
    catalog_code: str | None = None
    display_name: str | None = None
    custom_description: str | None = None
    is_featured: bool | None = None
    is_available: bool | None = None
    availability_start_date: datetime | None = None
    availability_end_date: datetime | None = None
    display_order: int | None = None
    min_quantity: int | None = None
    max_quantity: int | None = None
    shipping_available: bool | None = None
    shipping_cost: Decimal | None = None
    shipping_time_days: int | None = None
    special_conditions: str | None = None
    metadata_json: dict[str, Any] | None = _metadata_field()
    is_active: bool | None = None


class ProductCatalogUpdate(ProductCatalogCreate):
    lock_version: int | None = None


class ProductCatalogOut(AuditedOut, ProductCatalogCreate):
    distributor_id: str


class ProductCatalogFilter(CamelModel):
    product_id: str | None = None
    catalog_code: str | None = None
    display_name: str | None = None
    is_featured: bool | None = None
    is_available: bool | None = None
    shipping_available: bool | None = None
    is_active: bool | None = None
    shipping_cost: Range[Decimal] | None = None

"""Distributor, branding, operation and simulation schemas (request DTOs and response models)."""

from datetime import datetime

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.domain.enums import Theme
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


# ---------------------------------------------------------------------------
# Distributor
# ---------------------------------------------------------------------------

class DistributorCreate(CamelModel):
    external_code: str | None = None
    name: str
    display_name: str | None = None
    tax_id: str | None = None
    registration_number: str | None = None
    website_url: str | None = None
    phone_number: str | None = None
    email: str | None = None
    support_email: str | None = None
    address_line: str | None = None
    postal_code: str | None = None
    city: str | None = None
    state: str | None = None
    country_id: str | None = None
    is_active: bool | None = None
    is_test_distributor: bool | None = None
    time_zone: str | None = None
    default_locale: str | None = None
    onboarded_at: datetime | None = None
    terminated_at: datetime | None = None


class DistributorUpdate(DistributorCreate):
    lock_version: int | None = None


class DistributorOut(AuditedOut, DistributorCreate):
    pass


class DistributorFilter(CamelModel):
    name: str | None = None
    display_name: str | None = None
    external_code: str | None = None
    tax_id: str | None = None
    email: str | None = None
    city: str | None = None
    country_id: str | None = None
    is_active: bool | None = None
    is_test_distributor: bool | None = None
    onboarded_at: Range[datetime] | None = None
    created_at: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Branding
# ---------------------------------------------------------------------------

class DistributorBrandingCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    logo_url: str | None = None
    favicon_url: str | None = None
    primary_color: str | None = None
    secondary_color: str | None = None
    background_color: str | None = None
    font_family: str | None = None
    theme: Theme | None = None
    is_default: bool | None = None


class DistributorBrandingUpdate(DistributorBrandingCreate):
    lock_version: int | None = None


class DistributorBrandingOut(AuditedOut, DistributorBrandingCreate):
    distributor_id: str


class DistributorBrandingFilter(CamelModel):
    theme: Theme | None = None
    is_default: bool | None = None
    font_family: str | None = None


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

class DistributorOperationCreate(CamelModel):
    distributor_id: str | None = None
    country_id: str
    administrative_division_id: str | None = None
    is_active: bool | None = None


class DistributorOperationUpdate(DistributorOperationCreate):
    lock_version: int | None = None


class DistributorOperationOut(AuditedOut, DistributorOperationCreate):
    distributor_id: str


class DistributorOperationFilter(CamelModel):
    country_id: str | None = None
    administrative_division_id: str | None = None
    is_active: bool | None = None


class CanOperateResponse(CamelModel):
    distributor_id: str
    country_id: str
    administrative_division_id: str | None = None
    can_operate: bool


# ---------------------------------------------------------------------------
# Simulations
# ---------------------------------------------------------------------------

class DistributorSimulationCreate(CamelModel):
    distributor_id: str | None = None
    application_id: str | None = None
    simulation_status: str | None = None
    notes: str | None = None
    is_active: bool | None = None


class DistributorSimulationUpdate(DistributorSimulationCreate):
    lock_version: int | None = None


class DistributorSimulationOut(AuditedOut, DistributorSimulationCreate):
    distributor_id: str


class DistributorSimulationFilter(CamelModel):
    application_id: str | None = None
    simulation_status: str | None = None
    is_active: bool | None = None
    created_at: Range[datetime] | None = None

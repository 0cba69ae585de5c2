"""Agency, agent, assignment and payment-method schemas."""

from datetime import date, datetime
from typing import Any

from pydantic import AliasChoices, Field

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


# ---------------------------------------------------------------------------
# Agencies
# ---------------------------------------------------------------------------

class DistributorAgencyCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    name: str
    code: str | None = None
    description: str | None = None
    country_id: str | None = None
    administrative_division_id: str | None = None
    address_line: str | None = None
    postal_code: str | None = None
    city: str | None = None
    state: str | None = None
    phone_number: str | None = None
    email: str | None = None
    is_headquarters: bool | None = None
    is_active: bool | None = None
    opened_at: datetime | None = None
    closed_at: datetime | None = None


class DistributorAgencyUpdate(DistributorAgencyCreate):
    lock_version: int | None = None


class DistributorAgencyOut(AuditedOut, DistributorAgencyCreate):
    distributor_id: str


class DistributorAgencyFilter(CamelModel):
    name: str | None = None
    code: str | None = None
    city: str | None = None
    country_id: str | None = None
    is_headquarters: bool | None = None
    is_active: bool | None = None


# ---------------------------------------------------------------------------
# Agents
# ---------------------------------------------------------------------------

class DistributorAgentCreate(CamelModel):
    distributor_id: str | None = None
    user_id: str | None = None
    employee_code: str | None = None
    first_name: str
    last_name: str
    email: str | None = None
    phone_number: str | None = None
    department: str | None = None
    job_title: str | None = None
    hire_date: date | None = None
    termination_date: date | None = None
    is_active: bool | None = None


class DistributorAgentUpdate(DistributorAgentCreate):
    lock_version: int | None = None


class DistributorAgentOut(AuditedOut, DistributorAgentCreate):
    distributor_id: str


class DistributorAgentFilter(CamelModel):
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    employee_code: str | None = None
    department: str | None = None
    is_active: bool | None = None
    hire_date: Range[date] | None = None


# ---------------------------------------------------------------------------
# Agent <-> agency assignments
# ---------------------------------------------------------------------------

class DistributorAgentAgencyCreate(CamelModel):
    distributor_id: str | None = None
    agent_id: str
    agency_id: str
    role_id: str | None = None
    is_primary_agency: bool | None = None
    is_active: bool | None = None
    assigned_at: datetime | None = None
    unassigned_at: datetime | None = None


class DistributorAgentAgencyUpdate(DistributorAgentAgencyCreate):
    lock_version: int | None = None


class DistributorAgentAgencyOut(AuditedOut, DistributorAgentAgencyCreate):
    distributor_id: str


class DistributorAgentAgencyFilter(CamelModel):
    agent_id: str | None = None
    agency_id: str | None = None
    role_id: str | None = None
    is_primary_agency: bool | None = None
    is_active: bool | None = None
    assigned_at: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Agency payment methods
# ---------------------------------------------------------------------------

class AgencyPaymentMethodCreate(CamelModel):
    agency_id: str | None = None  # taken from the path
    payment_method_type: str
    payment_provider: str | None = None
    account_holder_name: str | None = None
    account_number: str | None = None
    routing_number: str | None = None
    swift_code: str | None = None
    iban: str | None = None
    bank_name: str | None = None
    currency_code: str | None = None
    wallet_id: str | None = None
    wallet_phone: str | None = None
    wallet_email: str | None = None
    is_primary: bool | None = None
    is_verified: bool | None = None
    verified_at: datetime | None = None
    verified_by: str | None = None
    is_active: bool | None = None
    notes: str | None = None
    # ORM attribute is metadata_json (Base.metadata is taken); the API field is "metadata"
    metadata_json: dict[str, Any] | None = Field(
        default=None,
        validation_alias=AliasChoices("metadata_json", "metadata"),
        serialization_alias="metadata",
    )


class AgencyPaymentMethodUpdate(AgencyPaymentMethodCreate):
    lock_version: int | None = None


class AgencyPaymentMethodOut(AuditedOut, AgencyPaymentMethodCreate):
    agency_id: str


class AgencyPaymentMethodFilter(CamelModel):
    payment_method_type: str | None = None
    payment_provider: str | None = None
    currency_code: str | None = None
    is_primary: bool | None = None
    is_verified: bool | None = None
    is_active: bool | None = None

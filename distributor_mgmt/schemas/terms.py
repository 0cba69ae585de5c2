"""Terms-and-conditions template, distributor terms and generation schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field

from distributor_mgmt.core.filtering import Range
from distributor_mgmt.domain.enums import TermsStatus
from distributor_mgmt.schemas.common import AuditedOut, CamelModel


# ---------------------------------------------------------------------------
# Templates
# ---------------------------------------------------------------------------

class TermsTemplateCreate(CamelModel):
    name: str
    description: str | None = None
    category: str | None = None
    template_content: str
    # {"distributorName": {"type": "string", "required": true}, ...}
    variables: dict[str, Any] | None = None
    version: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    approval_required: bool | None = None
    auto_renewal: bool | None = None
    renewal_period_months: int | None = None


class TermsTemplateUpdate(TermsTemplateCreate):
    lock_version: int | None = None


class TermsTemplateOut(AuditedOut, TermsTemplateCreate):
    pass


class TermsTemplateFilter(CamelModel):
    name: str | None = None
    category: str | None = None
    version: str | None = None
    is_default: bool | None = None
    is_active: bool | None = None
    approval_required: bool | None = None
    auto_renewal: bool | None = None


# ---------------------------------------------------------------------------
# Distributor terms
# ---------------------------------------------------------------------------

class DistributorTermsCreate(CamelModel):
    distributor_id: str | None = None  # taken from the path
    template_id: str | None = None
    title: str
    content: str
    version: str | None = None
    effective_date: datetime | None = None
    expiration_date: datetime | None = None
    signed_date: datetime | None = None
    signed_by: str | None = None
    status: TermsStatus | None = None
    is_active: bool | None = None
    notes: str | None = None


class DistributorTermsUpdate(DistributorTermsCreate):
    lock_version: int | None = None


class DistributorTermsOut(AuditedOut, DistributorTermsCreate):
    distributor_id: str
    status: str | None = None


class DistributorTermsFilter(CamelModel):
    template_id: str | None = None
    title: str | None = None
    version: str | None = None
    status: TermsStatus | None = None
    is_active: bool | None = None
    signed_by: str | None = None
    effective_date: Range[datetime] | None = None
    expiration_date: Range[datetime] | None = None


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

class GenerateTermsRequest(CamelModel):
    template_id: str
    variables: dict[str, Any] = Field(default_factory=dict)


class PreviewTermsRequest(CamelModel):
    variables: dict[str, Any] = Field(default_factory=dict)


class PreviewTermsOut(CamelModel):
    template_id: str
    content: str


class VariableValidationOut(CamelModel):
    valid: bool
    errors: list[str] = Field(default_factory=list)

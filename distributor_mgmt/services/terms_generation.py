"""Terms-and-conditions generation from templates.

Templates carry ``{{variableName}}`` placeholders and an optional ``variables``
declaration, e.g. ``{"distributorName": {"type": "string", "required": true}}``.
Generated terms are stored as DRAFT DistributorTermsAndConditions rows.
"""

from __future__ import annotations

import calendar
import logging
import re
from collections.abc import Mapping
from datetime import date, datetime, timedelta
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.config import settings
from distributor_mgmt.core.exceptions import ConflictError, ValidationError
from distributor_mgmt.domain.enums import TermsStatus
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.domain.terms import TermsAndConditionsTemplate
from distributor_mgmt.schemas.terms import DistributorTermsOut, TermsTemplateOut
from distributor_mgmt.services.base import Scope
from distributor_mgmt.services.distributor import DistributorService
from distributor_mgmt.services.terms import DistributorTermsService, TermsTemplateService

logger = logging.getLogger(__name__)

VARIABLE_PATTERN = re.compile(r"\{\{([^}]+)\}\}")
DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def process_template(content: str | None, variables: Mapping[str, Any] | None) -> str | None:
    """Substitute known placeholders; unknown or null ones are left as written."""
    if content is None or variables is None:
        return content

    def _replace(match: re.Match) -> str:
        value = variables.get(match.group(1))
        return match.group(0) if value is None else _format_value(value)

    return VARIABLE_PATTERN.sub(_replace, content)


def validate_variables(
    declarations: Mapping[str, Any] | None, variables: Mapping[str, Any]
) -> list[str]:
    """Return the problems with ``variables`` against a template's declarations."""
    errors: list[str] = []
    for name, declared in (declarations or {}).items():
        declared = declared if isinstance(declared, Mapping) else {}
        value = variables.get(name)
        if declared.get("required") and value is None:
            errors.append(f"Required variable '{name}' is missing")
            continue
        expected = str(declared.get("type", "string"))
        if value is not None and not _is_valid_type(value, expected):
            errors.append(f"Variable '{name}' has invalid type. Expected: {expected}")
    return errors


def _is_valid_type(value: Any, expected: str) -> bool:
    expected = expected.lower()
    if expected == "string":
        return isinstance(value, str)
    if expected == "number":
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if expected == "boolean":
        return isinstance(value, bool)
    if expected == "date":
        return isinstance(value, (str, date))
    return True  # undeclared types are not checked


def _format_value(value: Any) -> str:
    if isinstance(value, datetime):
        return value.strftime(DATETIME_FORMAT)
    if isinstance(value, date):
        return value.strftime(DATE_FORMAT)
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def add_months(moment: datetime, months: int) -> datetime:
    """Calendar month arithmetic, clamping the day (Jan 31 + 1 month = Feb 28/29)."""
    month_index = moment.month - 1 + months
    year, month = moment.year + month_index // 12, month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


class TermsGenerationService:
    """Render templates into distributor terms and manage their renewal."""

    def __init__(self, session: AsyncSession):
        self._templates = TermsTemplateService(session)
        self._terms = DistributorTermsService(session)
        self._distributors = DistributorService(session)

    # ------------------------------------------------------------------
    # Variables
    # ------------------------------------------------------------------

    async def default_variables(self, distributor_id: str) -> dict[str, Any]:
        """Variables derived from the distributor record; empty when it doesn't exist."""
        distributor = await self._distributors.get(distributor_id)
        if distributor is None:
            return {}
        now = utcnow()
        return {
            "distributorName": distributor.name,
            "distributorDisplayName": distributor.display_name,
            "distributorTaxId": distributor.tax_id,
            "distributorEmail": distributor.support_email,
            "distributorAddress": distributor.address_line,
            "distributorCity": distributor.city,
            "distributorState": distributor.state,
            "distributorPostalCode": distributor.postal_code,
            "distributorCountry": distributor.country_id,
            "distributorWebsite": distributor.website_url,
            "currentDate": now.strftime(DATE_FORMAT),
            "currentDateTime": now.strftime(DATETIME_FORMAT),
        }

    def validate(
        self, template: TermsAndConditionsTemplate | TermsTemplateOut, variables: Mapping[str, Any]
    ) -> list[str]:
        return validate_variables(template.variables, variables)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    async def generate(
        self,
        template_id: str,
        distributor_id: str,
        variables: Mapping[str, Any] | None = None,
        actor: str | None = None,
        *,
        expiration_date: datetime | None = None,
    ) -> DistributorTermsOut:
        """Create a DRAFT terms record for the distributor from the template."""
        template = await self._templates.require(template_id)
        merged = {**await self.default_variables(distributor_id), **(variables or {})}
        errors = self.validate(template, merged)
        if errors:
            logger.warning("Template %s rejected variables: %s", template_id, errors)
            raise ValidationError("; ".join(errors))

        terms = await self._terms.create(
            {
                "distributor_id": distributor_id,
                "template_id": template.id,
                "title": template.name,
                "content": process_template(template.template_content, merged),
                "version": template.version,
                "effective_date": utcnow(),
                "expiration_date": expiration_date,
                "status": TermsStatus.DRAFT.value,
                "is_active": True,
            },
            actor=actor,
        )
        logger.info(
            "Generated terms id=%s from template=%s for distributor=%s",
            terms.id, template.id, distributor_id,
        )
        return terms

    async def preview(self, template_id: str, variables: Mapping[str, Any] | None = None) -> str:
        template = await self._templates.require(template_id)
        return process_template(template.template_content, dict(variables or {}))

    # ------------------------------------------------------------------
    # Renewal
    # ------------------------------------------------------------------

    async def needs_renewal(self, terms_id: str, scope: Scope = None) -> bool:
        """True once the expiration date is within the renewal notice window."""
        terms = await self._terms.require(terms_id, scope)
        if terms.expiration_date is None:
            return False
        threshold = terms.expiration_date - timedelta(days=settings.renewal_notice_days)
        return utcnow() > threshold

    async def auto_renew(
        self, terms_id: str, actor: str | None = None, scope: Scope = None
    ) -> DistributorTermsOut:
        """Generate a fresh DRAFT from the same template, starting now."""
        terms = await self._terms.require(terms_id, scope)
        if terms.template_id is None:
            raise ConflictError(
                "Cannot auto-renew terms without a template",
                entity=self._terms.entity_name,
                entity_id=terms_id,
            )
        template = await self._templates.require(terms.template_id)
        if not template.auto_renewal:
            raise ConflictError(
                "Template does not support auto-renewal",
                entity=self._templates.entity_name,
                entity_id=template.id,
            )

        now = utcnow()
        variables: dict[str, Any] = {"effectiveDate": now.strftime(DATE_FORMAT)}
        expiration = None
        if template.renewal_period_months is not None:
            expiration = add_months(now, template.renewal_period_months)
            variables["expirationDate"] = expiration.strftime(DATE_FORMAT)

        return await self.generate(
            template.id, terms.distributor_id, variables, actor, expiration_date=expiration
        )

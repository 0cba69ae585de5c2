"""Agency, agent, assignment and payment-method services."""

from __future__ import annotations

from typing import Any

from distributor_mgmt.domain.agency import (
    AgencyPaymentMethod,
    DistributorAgency,
    DistributorAgent,
    DistributorAgentAgency,
)
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.repositories.agency import (
    AgencyPaymentMethodRepository,
    DistributorAgencyRepository,
    DistributorAgentAgencyRepository,
    DistributorAgentRepository,
)
from distributor_mgmt.schemas.agency import (
    AgencyPaymentMethodOut,
    DistributorAgencyOut,
    DistributorAgentAgencyOut,
    DistributorAgentOut,
)
from distributor_mgmt.services.base import EntityService, Scope


class DistributorAgencyService(EntityService[DistributorAgency, DistributorAgencyOut]):
    entity_name = "DistributorAgency"
    repository_class = DistributorAgencyRepository
    out_schema = DistributorAgencyOut
    defaults = {"is_active": True, "is_headquarters": False}
    scope_fields = ("distributor_id",)


class DistributorAgentService(EntityService[DistributorAgent, DistributorAgentOut]):
    entity_name = "DistributorAgent"
    repository_class = DistributorAgentRepository
    out_schema = DistributorAgentOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)


class DistributorAgentAgencyService(EntityService[DistributorAgentAgency, DistributorAgentAgencyOut]):
    entity_name = "DistributorAgentAgency"
    repository_class = DistributorAgentAgencyRepository
    out_schema = DistributorAgentAgencyOut
    defaults = {"is_active": True, "is_primary_agency": False, "assigned_at": utcnow}
    scope_fields = ("distributor_id",)


class AgencyPaymentMethodService(EntityService[AgencyPaymentMethod, AgencyPaymentMethodOut]):
    """An agency has at most one primary payment method."""

    entity_name = "AgencyPaymentMethod"
    repository_class = AgencyPaymentMethodRepository
    out_schema = AgencyPaymentMethodOut
    defaults = {"is_active": True, "is_primary": False, "is_verified": False}
    scope_fields = ("agency_id",)

    async def _before_write(
        self, values: dict[str, Any], existing: AgencyPaymentMethod | None, actor: str | None
    ) -> None:
        if values.get("is_primary"):
            await self._repo.clear_primary(
                values["agency_id"],
                except_id=existing.id if existing is not None else None,
                actor=actor,
            )

    async def set_primary(
        self, method_id: str, actor: str | None = None, scope: Scope = None
    ) -> AgencyPaymentMethodOut:
        existing = await self.require(method_id, scope)
        await self._repo.clear_primary(existing.agency_id, except_id=existing.id, actor=actor)
        return await self.transition(method_id, actor, scope, is_primary=True)

    async def verify(
        self, method_id: str, actor: str | None = None, scope: Scope = None
    ) -> AgencyPaymentMethodOut:
        return await self.transition(
            method_id, actor, scope, is_verified=True, verified_at=utcnow(), verified_by=actor
        )

    async def primary_for_agency(self, agency_id: str) -> AgencyPaymentMethodOut | None:
        return await self.find_one_by(agency_id=agency_id, is_primary=True)

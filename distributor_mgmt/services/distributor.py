"""Distributor, branding, operation and simulation services."""

from distributor_mgmt.domain.distributor import (
    Distributor,
    DistributorBranding,
    DistributorOperation,
    DistributorSimulation,
)
from distributor_mgmt.repositories.distributor import (
    DistributorBrandingRepository,
    DistributorOperationRepository,
    DistributorRepository,
    DistributorSimulationRepository,
)
from distributor_mgmt.schemas.distributor import (
    DistributorBrandingOut,
    DistributorOperationOut,
    DistributorOut,
    DistributorSimulationOut,
)
from distributor_mgmt.services.base import EntityService, Scope


class DistributorService(EntityService[Distributor, DistributorOut]):
    entity_name = "Distributor"
    repository_class = DistributorRepository
    out_schema = DistributorOut
    defaults = {"is_active": True, "is_test_distributor": False}


class DistributorBrandingService(EntityService[DistributorBranding, DistributorBrandingOut]):
    entity_name = "DistributorBranding"
    repository_class = DistributorBrandingRepository
    out_schema = DistributorBrandingOut
    defaults = {"is_default": False}
    scope_fields = ("distributor_id",)


class DistributorOperationService(EntityService[DistributorOperation, DistributorOperationOut]):
    entity_name = "DistributorOperation"
    repository_class = DistributorOperationRepository
    out_schema = DistributorOperationOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)

    async def list_for_distributor(self, distributor_id: str) -> list[DistributorOperationOut]:
        return await self.find_by(distributor_id=distributor_id)

    async def list_active(self, distributor_id: str) -> list[DistributorOperationOut]:
        return await self.find_by(distributor_id=distributor_id, is_active=True)

    async def list_by_country(self, country_id: str) -> list[DistributorOperationOut]:
        return await self.find_by(country_id=country_id)

    async def list_by_administrative_division(
        self, administrative_division_id: str
    ) -> list[DistributorOperationOut]:
        return await self.find_by(administrative_division_id=administrative_division_id)

    async def can_operate(
        self,
        distributor_id: str,
        country_id: str,
        administrative_division_id: str | None = None,
    ) -> bool:
        """True when an active operation exists for exactly this country/division pair."""
        return await self.exists_by(
            distributor_id=distributor_id,
            country_id=country_id,
            administrative_division_id=administrative_division_id,
            is_active=True,
        )


class DistributorSimulationService(EntityService[DistributorSimulation, DistributorSimulationOut]):
    entity_name = "DistributorSimulation"
    repository_class = DistributorSimulationRepository
    out_schema = DistributorSimulationOut
    defaults = {"is_active": True, "simulation_status": "PENDING"}
    scope_fields = ("distributor_id",)

    async def list_by_status(self, distributor_id: str, status: str) -> list[DistributorSimulationOut]:
        return await self.find_by(distributor_id=distributor_id, simulation_status=status)

    async def list_active(self, distributor_id: str) -> list[DistributorSimulationOut]:
        return await self.find_by(distributor_id=distributor_id, is_active=True)

    async def list_by_application(self, application_id: str) -> list[DistributorSimulationOut]:
        return await self.find_by(application_id=application_id)

    async def update_status(
        self,
        simulation_id: str,
        status: str,
        actor: str | None = None,
        scope: Scope = None,
    ) -> DistributorSimulationOut:
        return await self.transition(simulation_id, actor, scope, simulation_status=status)

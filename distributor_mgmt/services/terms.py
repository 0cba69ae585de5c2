"""Terms-and-conditions template and distributor terms services."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from distributor_mgmt.core.exceptions import ConflictError, NotFoundError
from distributor_mgmt.domain.enums import TermsStatus
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.domain.terms import DistributorTermsAndConditions, TermsAndConditionsTemplate
from distributor_mgmt.repositories.terms import DistributorTermsRepository, TermsTemplateRepository
from distributor_mgmt.schemas.terms import DistributorTermsOut, TermsTemplateOut
from distributor_mgmt.services.base import EntityService, Scope


class TermsTemplateService(EntityService[TermsAndConditionsTemplate, TermsTemplateOut]):
    """Template names are unique; at most one active default per category."""

    entity_name = "TermsAndConditionsTemplate"
    repository_class = TermsTemplateRepository
    out_schema = TermsTemplateOut
    defaults = {
        "is_active": True,
        "is_default": False,
        "approval_required": True,
        "auto_renewal": False,
    }

    async def _before_write(
        self,
        values: dict[str, Any],
        existing: TermsAndConditionsTemplate | None,
        actor: str | None,
    ) -> None:
        exclude_id = existing.id if existing is not None else None
        if await self.name_exists(values["name"], exclude_id):
            raise ConflictError(
                f"Template name '{values['name']}' already exists",
                entity=self.entity_name,
                entity_id=exclude_id,
            )
        if values.get("is_default") and values.get("is_active"):
            await self._repo.clear_default(
                values.get("category"), except_id=exclude_id, actor=actor
            )

    async def name_exists(self, name: str, exclude_id: str | None = None) -> bool:
        return await self._repo.name_exists(name, exclude_id)

    # -- lookups -------------------------------------------------------

    async def list_active(self) -> list[TermsTemplateOut]:
        return await self.find_by(is_active=True)

    async def list_by_category(self, category: str) -> list[TermsTemplateOut]:
        return await self.find_by(category=category)

    async def list_active_by_category(self, category: str) -> list[TermsTemplateOut]:
        return await self.find_by(category=category, is_active=True)

    async def get_by_name(self, name: str) -> TermsTemplateOut | None:
        return await self.find_one_by(name=name)

    async def list_by_version(self, version: str) -> list[TermsTemplateOut]:
        return await self.find_by(version=version)

    async def list_defaults(self) -> list[TermsTemplateOut]:
        return await self.find_by(is_default=True, is_active=True)

    async def default_for_category(self, category: str) -> TermsTemplateOut | None:
        return await self.find_one_by(category=category, is_default=True, is_active=True)

    async def list_requiring_approval(self) -> list[TermsTemplateOut]:
        return await self.find_by(approval_required=True, is_active=True)

    async def list_auto_renewal(self) -> list[TermsTemplateOut]:
        return await self.find_by(auto_renewal=True, is_active=True)

    # -- transitions ---------------------------------------------------

    async def set_default(self, template_id: str, actor: str | None = None) -> TermsTemplateOut:
        template = await self.require(template_id)
        await self._repo.clear_default(template.category, except_id=template.id, actor=actor)
        return await self.transition(template_id, actor, is_default=True)

    async def remove_default(self, template_id: str, actor: str | None = None) -> TermsTemplateOut:
        return await self.transition(template_id, actor, is_default=False)


class DistributorTermsService(EntityService[DistributorTermsAndConditions, DistributorTermsOut]):
    entity_name = "DistributorTermsAndConditions"
    repository_class = DistributorTermsRepository
    out_schema = DistributorTermsOut
    defaults = {"is_active": True, "status": TermsStatus.DRAFT.value}
    scope_fields = ("distributor_id",)

    async def list_for_distributor(self, distributor_id: str) -> list[DistributorTermsOut]:
        return await self.find_by(distributor_id=distributor_id)

    async def list_active(self, distributor_id: str) -> list[DistributorTermsOut]:
        return await self.find_by(distributor_id=distributor_id, is_active=True)

    async def list_by_status(
        self, distributor_id: str, status: TermsStatus | str
    ) -> list[DistributorTermsOut]:
        return await self.find_by(distributor_id=distributor_id, status=TermsStatus(status).value)

    async def list_by_template(
        self, distributor_id: str, template_id: str
    ) -> list[DistributorTermsOut]:
        return await self.find_by(distributor_id=distributor_id, template_id=template_id)

    async def list_expiring_before(
        self, distributor_id: str, before: datetime
    ) -> list[DistributorTermsOut]:
        return [self.to_out(row) for row in await self._repo.expiring_before(distributor_id, before)]

    async def has_active_signed(self, distributor_id: str) -> bool:
        return await self.exists_by(
            distributor_id=distributor_id, status=TermsStatus.SIGNED.value, is_active=True
        )

    async def latest_active(self, distributor_id: str) -> DistributorTermsOut:
        row = await self._repo.latest_active(distributor_id)
        if row is None:
            raise NotFoundError(f"Active {self.entity_name} for distributor", distributor_id)
        return self.to_out(row)

    async def update_status(
        self,
        terms_id: str,
        status: TermsStatus | str,
        actor: str | None = None,
        scope: Scope = None,
    ) -> DistributorTermsOut:
        return await self.transition(terms_id, actor, scope, status=TermsStatus(status).value)

    async def sign(
        self, terms_id: str, signed_by: str | None = None, scope: Scope = None
    ) -> DistributorTermsOut:
        """SIGNED, stamped with signer and time; title/content/version untouched."""
        return await self.transition(
            terms_id,
            signed_by,
            scope,
            status=TermsStatus.SIGNED.value,
            signed_date=utcnow(),
            signed_by=signed_by,
        )

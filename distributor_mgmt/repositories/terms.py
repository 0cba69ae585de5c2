"""Repositories for terms-and-conditions templates and distributor terms."""

from datetime import datetime

from sqlalchemy import exists, select, update

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.domain.terms import DistributorTermsAndConditions, TermsAndConditionsTemplate
from distributor_mgmt.repositories.base import BaseRepository


class TermsTemplateRepository(BaseRepository[TermsAndConditionsTemplate]):
    model = TermsAndConditionsTemplate
    filter_fields = {
        "name": FilterOp.PREFIX,
        "category": FilterOp.EQ,
        "version": FilterOp.EQ,
        "is_default": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "approval_required": FilterOp.EQ,
        "auto_renewal": FilterOp.EQ,
    }

    async def name_exists(self, name: str, exclude_id: str | None = None) -> bool:
        inner = select(TermsAndConditionsTemplate.id).where(TermsAndConditionsTemplate.name == name)
        if exclude_id is not None:
            inner = inner.where(TermsAndConditionsTemplate.id != exclude_id)
        return bool((await self._session.execute(select(exists(inner)))).scalar())

    async def clear_default(
        self, category: str | None, *, except_id: str | None = None, actor: str | None = None
    ) -> int:
        """Unset is_default on the active templates of ``category``."""
        model = TermsAndConditionsTemplate
        stmt = (
            update(model)
            .where(model.is_default.is_(True), model.is_active.is_(True))
            .where(model.category.is_(None) if category is None else model.category == category)
            .values(
                is_default=False,
                updated_at=utcnow(),
                updated_by=actor,
                lock_version=model.lock_version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if except_id is not None:
            stmt = stmt.where(model.id != except_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount


class DistributorTermsRepository(BaseRepository[DistributorTermsAndConditions]):
    model = DistributorTermsAndConditions
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "template_id": FilterOp.EQ,
        "title": FilterOp.PREFIX,
        "version": FilterOp.EQ,
        "status": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "signed_by": FilterOp.EQ,
        "effective_date": FilterOp.RANGE,
        "expiration_date": FilterOp.RANGE,
    }

    async def expiring_before(
        self, distributor_id: str, before: datetime
    ) -> list[DistributorTermsAndConditions]:
        """Active terms of a distributor whose expiration date is before ``before``."""
        model = DistributorTermsAndConditions
        q = (
            select(model)
            .where(
                model.distributor_id == distributor_id,
                model.is_active.is_(True),
                model.expiration_date.is_not(None),
                model.expiration_date < before,
            )
            .order_by(model.expiration_date.asc(), model.id.asc())
        )
        return list((await self._session.execute(q)).scalars().all())

    async def latest_active(self, distributor_id: str) -> DistributorTermsAndConditions | None:
        """Most recently effective active terms (nulls last, then newest created)."""
        model = DistributorTermsAndConditions
        q = (
            select(model)
            .where(model.distributor_id == distributor_id, model.is_active.is_(True))
            .order_by(
                model.effective_date.is_(None),
                model.effective_date.desc(),
                model.created_at.desc(),
                model.id.asc(),
            )
            .limit(1)
        )
        return (await self._session.execute(q)).scalars().first()

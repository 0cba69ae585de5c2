"""Cross-entity read queries that don't belong to a single entity's repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.domain.product import LendingConfiguration, Product


class LendingReadModel:
    """Lending configurations reached through a distributor's products."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _by_distributor(self, distributor_id: str):
        return (
            select(LendingConfiguration)
            .join(Product, LendingConfiguration.product_id == Product.id)
            .where(Product.distributor_id == distributor_id)
            .order_by(LendingConfiguration.created_at.desc(), LendingConfiguration.id.asc())
        )

    async def configurations_for_distributor(
        self, distributor_id: str, *, active_only: bool = False
    ) -> list[LendingConfiguration]:
        q = self._by_distributor(distributor_id)
        if active_only:
            q = q.where(LendingConfiguration.is_active.is_(True))
        return list((await self._session.execute(q)).scalars().all())

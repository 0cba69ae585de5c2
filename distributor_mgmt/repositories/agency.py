"""Repositories for agencies, agents, assignments and agency payment methods."""

from sqlalchemy import update

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.agency import (
    AgencyPaymentMethod,
    DistributorAgency,
    DistributorAgent,
    DistributorAgentAgency,
)
from distributor_mgmt.domain.mixins import utcnow
from distributor_mgmt.repositories.base import BaseRepository


class DistributorAgencyRepository(BaseRepository[DistributorAgency]):
    model = DistributorAgency
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "name": FilterOp.PREFIX,
        "code": FilterOp.EQ,
        "city": FilterOp.PREFIX,
        "country_id": FilterOp.EQ,
        "is_headquarters": FilterOp.EQ,
        "is_active": FilterOp.EQ,
    }


class DistributorAgentRepository(BaseRepository[DistributorAgent]):
    model = DistributorAgent
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "first_name": FilterOp.PREFIX,
        "last_name": FilterOp.PREFIX,
        "email": FilterOp.EQ,
        "employee_code": FilterOp.EQ,
        "department": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "hire_date": FilterOp.RANGE,
    }


class DistributorAgentAgencyRepository(BaseRepository[DistributorAgentAgency]):
    model = DistributorAgentAgency
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "agent_id": FilterOp.EQ,
        "agency_id": FilterOp.EQ,
        "role_id": FilterOp.EQ,
        "is_primary_agency": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "assigned_at": FilterOp.RANGE,
    }


class AgencyPaymentMethodRepository(BaseRepository[AgencyPaymentMethod]):
    model = AgencyPaymentMethod
    filter_fields = {
        "agency_id": FilterOp.EQ,
        "payment_method_type": FilterOp.EQ,
        "payment_provider": FilterOp.EQ,
        "currency_code": FilterOp.EQ,
        "is_primary": FilterOp.EQ,
        "is_verified": FilterOp.EQ,
        "is_active": FilterOp.EQ,
    }

    async def clear_primary(
        self, agency_id: str, *, except_id: str | None = None, actor: str | None = None
    ) -> int:
        """Unset is_primary on every method of the agency except ``except_id``."""
        stmt = (
            update(AgencyPaymentMethod)
            .where(
                AgencyPaymentMethod.agency_id == agency_id,
                AgencyPaymentMethod.is_primary.is_(True),
            )
            .values(
                is_primary=False,
                updated_at=utcnow(),
                updated_by=actor,
                lock_version=AgencyPaymentMethod.lock_version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if except_id is not None:
            stmt = stmt.where(AgencyPaymentMethod.id != except_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount

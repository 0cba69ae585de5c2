"""Repositories for distributors and their per-distributor settings.

How to add a new repository:
  1. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
         filter_fields = {"name": FilterOp.PREFIX, "is_active": FilterOp.EQ}
  2. Add domain-specific query methods only when find_by/exists_by can't express them
"""

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.distributor import (
    Distributor,
    DistributorBranding,
    DistributorOperation,
    DistributorSimulation,
)
from distributor_mgmt.repositories.base import BaseRepository


class DistributorRepository(BaseRepository[Distributor]):
    model = Distributor
    filter_fields = {
        "name": FilterOp.PREFIX,
        "display_name": FilterOp.PREFIX,
        "external_code": FilterOp.EQ,
        "tax_id": FilterOp.EQ,
        "email": FilterOp.EQ,
        "city": FilterOp.PREFIX,
        "country_id": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "is_test_distributor": FilterOp.EQ,
        "onboarded_at": FilterOp.RANGE,
        "created_at": FilterOp.RANGE,
    }


class DistributorBrandingRepository(BaseRepository[DistributorBranding]):
    model = DistributorBranding
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "theme": FilterOp.EQ,
        "is_default": FilterOp.EQ,
        "font_family": FilterOp.EQ,
    }


class DistributorOperationRepository(BaseRepository[DistributorOperation]):
    model = DistributorOperation
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "country_id": FilterOp.EQ,
        "administrative_division_id": FilterOp.EQ,
        "is_active": FilterOp.EQ,
    }


class DistributorSimulationRepository(BaseRepository[DistributorSimulation]):
    model = DistributorSimulation
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "application_id": FilterOp.EQ,
        "simulation_status": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "created_at": FilterOp.RANGE,
    }

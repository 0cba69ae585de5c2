"""Authorized territory, distributor contract and product catalog services.

Plain distributor-scoped resources: the EntityService lifecycle with no
entity rules of their own.
"""

from distributor_mgmt.domain.commercial import (
    DistributorAuthorizedTerritory,
    DistributorContract,
    DistributorProductCatalog,
)
from distributor_mgmt.repositories.commercial import (
    AuthorizedTerritoryRepository,
    DistributorContractRepository,
    ProductCatalogRepository,
)
from distributor_mgmt.schemas.commercial import (
    AuthorizedTerritoryOut,
    DistributorContractOut,
    ProductCatalogOut,
)
from distributor_mgmt.services.base import EntityService


class AuthorizedTerritoryService(EntityService[DistributorAuthorizedTerritory, AuthorizedTerritoryOut]):
    entity_name = "DistributorAuthorizedTerritory"
    repository_class = AuthorizedTerritoryRepository
    out_schema = AuthorizedTerritoryOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)


class DistributorContractService(EntityService[DistributorContract, DistributorContractOut]):
    entity_name = "DistributorContract"
    repository_class = DistributorContractRepository
    out_schema = DistributorContractOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)


class ProductCatalogService(EntityService[DistributorProductCatalog, ProductCatalogOut]):
    entity_name = "DistributorProductCatalog"
    repository_class = ProductCatalogRepository
    out_schema = ProductCatalogOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)

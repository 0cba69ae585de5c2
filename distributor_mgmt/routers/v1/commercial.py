"""Authorized territory, distributor contract and product catalog routers.

Each is a distributor-scoped resource with only the uniform CRUD + /filter shape.
"""

from fastapi import APIRouter

from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import distributor_scope
from distributor_mgmt.schemas.commercial import (
    AuthorizedTerritoryCreate,
    AuthorizedTerritoryFilter,
    AuthorizedTerritoryOut,
    AuthorizedTerritoryUpdate,
    DistributorContractCreate,
    DistributorContractFilter,
    DistributorContractOut,
    DistributorContractUpdate,
    ProductCatalogCreate,
    ProductCatalogFilter,
    ProductCatalogOut,
    ProductCatalogUpdate,
)
from distributor_mgmt.services.commercial import (
    AuthorizedTerritoryService,
    DistributorContractService,
    ProductCatalogService,
)

territories_router = APIRouter(
    prefix="/distributors/{distributor_id}/authorized-territories", tags=["Distributor Authorized Territories"]
)
contracts_router = APIRouter(prefix="/distributors/{distributor_id}/contracts", tags=["Distributor Contracts"])
catalog_router = APIRouter(prefix="/distributors/{distributor_id}/product-catalog", tags=["Distributor Product Catalog"])

register_crud_routes(
    territories_router,
    service_class=AuthorizedTerritoryService,
    create_schema=AuthorizedTerritoryCreate,
    update_schema=AuthorizedTerritoryUpdate,
    out_schema=AuthorizedTerritoryOut,
    filter_schema=AuthorizedTerritoryFilter,
    scope=distributor_scope,
)

register_crud_routes(
    contracts_router,
    service_class=DistributorContractService,
    create_schema=DistributorContractCreate,
    update_schema=DistributorContractUpdate,
    out_schema=DistributorContractOut,
    filter_schema=DistributorContractFilter,
    scope=distributor_scope,
)

register_crud_routes(
    catalog_router,
    service_class=ProductCatalogService,
    create_schema=ProductCatalogCreate,
    update_schema=ProductCatalogUpdate,
    out_schema=ProductCatalogOut,
    filter_schema=ProductCatalogFilter,
    scope=distributor_scope,
)

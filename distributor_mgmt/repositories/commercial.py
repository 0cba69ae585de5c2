"""Repositories for authorized territories, distributor contracts and the product catalog."""

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.commercial import (
    DistributorAuthorizedTerritory,
    DistributorContract,
    DistributorProductCatalog,
)
from distributor_mgmt.repositories.base import BaseRepository


class AuthorizedTerritoryRepository(BaseRepository[DistributorAuthorizedTerritory]):
    model = DistributorAuthorizedTerritory
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "country_id": FilterOp.EQ,
        "administrative_division_id": FilterOp.EQ,
        "authorization_level": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "authorized_from": FilterOp.RANGE,
        "authorized_until": FilterOp.RANGE,
    }


class DistributorContractRepository(BaseRepository[DistributorContract]):
    model = DistributorContract
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "contract_number": FilterOp.EQ,
        "contract_type": FilterOp.EQ,
        "title": FilterOp.PREFIX,
        "status": FilterOp.EQ,
        "auto_renewal": FilterOp.EQ,
        "currency_code": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "start_date": FilterOp.RANGE,
        "end_date": FilterOp.RANGE,
        "contract_value": FilterOp.RANGE,
    }
    default_sort = (("start_date", "desc"),)


class ProductCatalogRepository(BaseRepository[DistributorProductCatalog]):
    model = DistributorProductCatalog
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "product_id": FilterOp.EQ,
        "catalog_code": FilterOp.EQ,
        "display_name": FilterOp.PREFIX,
        "is_featured": FilterOp.EQ,
        "is_available": FilterOp.EQ,
        "shipping_available": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "shipping_cost": FilterOp.RANGE,
    }
    default_sort = (("display_order", "asc"),)

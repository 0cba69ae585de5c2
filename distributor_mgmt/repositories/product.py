"""Repositories for the product catalogue and lending configurations."""

from distributor_mgmt.core.filtering import FilterOp
from distributor_mgmt.domain.product import (
    LendingConfiguration,
    LendingType,
    Product,
    ProductCategory,
)
from distributor_mgmt.repositories.base import BaseRepository


class ProductCategoryRepository(BaseRepository[ProductCategory]):
    model = ProductCategory
    filter_fields = {
        "name": FilterOp.PREFIX,
        "code": FilterOp.EQ,
        "is_active": FilterOp.EQ,
    }
    default_sort = (("name", "asc"),)


class LendingTypeRepository(BaseRepository[LendingType]):
    model = LendingType
    filter_fields = {
        "name": FilterOp.PREFIX,
        "code": FilterOp.EQ,
        "is_active": FilterOp.EQ,
    }
    default_sort = (("name", "asc"),)


class ProductRepository(BaseRepository[Product]):
    model = Product
    filter_fields = {
        "distributor_id": FilterOp.EQ,
        "name": FilterOp.PREFIX,
        "sku": FilterOp.EQ,
        "manufacturer": FilterOp.PREFIX,
        "category_id": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "created_at": FilterOp.RANGE,
    }


class LendingConfigurationRepository(BaseRepository[LendingConfiguration]):
    model = LendingConfiguration
    filter_fields = {
        "product_id": FilterOp.EQ,
        "name": FilterOp.PREFIX,
        "lending_type_id": FilterOp.EQ,
        "is_default": FilterOp.EQ,
        "is_active": FilterOp.EQ,
        "interest_rate": FilterOp.RANGE,
        "min_term_months": FilterOp.RANGE,
        "max_term_months": FilterOp.RANGE,
    }

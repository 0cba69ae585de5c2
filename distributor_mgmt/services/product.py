"""Product catalogue and lending-configuration services."""

from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.domain.product import (
    LendingConfiguration,
    LendingType,
    Product,
    ProductCategory,
)
from distributor_mgmt.repositories.base import BaseRepository
from distributor_mgmt.repositories.product import (
    LendingConfigurationRepository,
    LendingTypeRepository,
    ProductCategoryRepository,
    ProductRepository,
)
from distributor_mgmt.repositories.read_models import LendingReadModel
from distributor_mgmt.schemas.product import (
    LendingConfigurationOut,
    LendingTypeOut,
    ProductCategoryOut,
    ProductOut,
)
from distributor_mgmt.services.base import EntityService, ModelT, OutT


class _CodedReferenceService(EntityService[ModelT, OutT]):
    """Reference data looked up by a unique business code."""

    defaults = {"is_active": True}

    async def list_all(self) -> list[OutT]:
        return await self.find_by()

    async def list_active(self) -> list[OutT]:
        return await self.find_by(is_active=True)

    async def get_by_code(self, code: str) -> OutT | None:
        return await self.find_one_by(code=code)


class ProductCategoryService(_CodedReferenceService[ProductCategory, ProductCategoryOut]):
    entity_name = "ProductCategory"
    repository_class = ProductCategoryRepository
    out_schema = ProductCategoryOut


class LendingTypeService(_CodedReferenceService[LendingType, LendingTypeOut]):
    entity_name = "LendingType"
    repository_class = LendingTypeRepository
    out_schema = LendingTypeOut


class ProductService(EntityService[Product, ProductOut]):
    entity_name = "Product"
    repository_class = ProductRepository
    out_schema = ProductOut
    defaults = {"is_active": True}
    scope_fields = ("distributor_id",)

    async def list_for_distributor(self, distributor_id: str) -> list[ProductOut]:
        return await self.find_by(distributor_id=distributor_id)

    async def list_active(self, distributor_id: str) -> list[ProductOut]:
        return await self.find_by(distributor_id=distributor_id, is_active=True)

    async def list_by_category(self, distributor_id: str, category_id: str) -> list[ProductOut]:
        return await self.find_by(distributor_id=distributor_id, category_id=category_id)


class LendingConfigurationService(EntityService[LendingConfiguration, LendingConfigurationOut]):
    entity_name = "LendingConfiguration"
    repository_class = LendingConfigurationRepository
    out_schema = LendingConfigurationOut
    defaults = {"is_active": True, "is_default": False}
    scope_fields = ("product_id",)

    def __init__(
        self,
        session: AsyncSession,
        repository: BaseRepository | None = None,
        read_model: LendingReadModel | None = None,
    ):
        super().__init__(session, repository)
        self._read_model = read_model if read_model is not None else LendingReadModel(session)

    async def list_for_product(self, product_id: str) -> list[LendingConfigurationOut]:
        return await self.find_by(product_id=product_id)

    async def list_active_for_product(self, product_id: str) -> list[LendingConfigurationOut]:
        return await self.find_by(product_id=product_id, is_active=True)

    async def list_by_lending_type(self, lending_type_id: str) -> list[LendingConfigurationOut]:
        return await self.find_by(lending_type_id=lending_type_id)

    async def default_for_product(self, product_id: str) -> LendingConfigurationOut:
        found = await self.find_one_by(product_id=product_id, is_default=True, is_active=True)
        if found is None:
            raise NotFoundError(f"Default {self.entity_name} for product", product_id)
        return found

    async def list_for_distributor(
        self, distributor_id: str, *, active_only: bool = False
    ) -> list[LendingConfigurationOut]:
        rows = await self._read_model.configurations_for_distributor(
            distributor_id, active_only=active_only
        )
        return [self.to_out(row) for row in rows]

"""Product category, lending type, product and lending-configuration routers."""

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import distributor_scope, product_scope
from distributor_mgmt.schemas.product import (
    LendingConfigurationCreate,
    LendingConfigurationFilter,
    LendingConfigurationOut,
    LendingConfigurationUpdate,
    LendingTypeCreate,
    LendingTypeFilter,
    LendingTypeOut,
    LendingTypeUpdate,
    ProductCategoryCreate,
    ProductCategoryFilter,
    ProductCategoryOut,
    ProductCategoryUpdate,
    ProductCreate,
    ProductFilter,
    ProductOut,
    ProductUpdate,
)
from distributor_mgmt.services.product import (
    LendingConfigurationService,
    LendingTypeService,
    ProductCategoryService,
    ProductService,
)

categories_router = APIRouter(prefix="/product-categories", tags=["Product Categories"])
lending_types_router = APIRouter(prefix="/lending-types", tags=["Lending Types"])
products_router = APIRouter(prefix="/distributors/{distributor_id}/products", tags=["Products"])
configurations_router = APIRouter(
    prefix="/products/{product_id}/lending-configurations", tags=["Lending Configurations"]
)
lending_types_configurations_router = APIRouter(
    prefix="/lending-types/{lending_type_id}/lending-configurations", tags=["Lending Configurations"]
)
distributor_configurations_router = APIRouter(
    prefix="/distributors/{distributor_id}/lending-configurations", tags=["Lending Configurations"]
)


# ------------------------------------------------------------------
# Product categories
# ------------------------------------------------------------------

@categories_router.get("", response_model=DataResponse[list[ProductCategoryOut]])
async def list_categories(session: AsyncSession = Depends(get_db)):
    return wrap(await ProductCategoryService(session).list_all())


@categories_router.get("/active", response_model=DataResponse[list[ProductCategoryOut]])
async def list_active_categories(session: AsyncSession = Depends(get_db)):
    return wrap(await ProductCategoryService(session).list_active())


@categories_router.get("/by-code/{code}", response_model=DataResponse[ProductCategoryOut])
async def get_category_by_code(code: str, session: AsyncSession = Depends(get_db)):
    found = await ProductCategoryService(session).get_by_code(code)
    if found is None:
        raise NotFoundError("ProductCategory", code)
    return wrap(found)


register_crud_routes(
    categories_router,
    service_class=ProductCategoryService,
    create_schema=ProductCategoryCreate,
    update_schema=ProductCategoryUpdate,
    out_schema=ProductCategoryOut,
    filter_schema=ProductCategoryFilter,
)


# ------------------------------------------------------------------
# Lending types
# ------------------------------------------------------------------

@lending_types_router.get("", response_model=DataResponse[list[LendingTypeOut]])
async def list_lending_types(session: AsyncSession = Depends(get_db)):
    return wrap(await LendingTypeService(session).list_all())


@lending_types_router.get("/active", response_model=DataResponse[list[LendingTypeOut]])
async def list_active_lending_types(session: AsyncSession = Depends(get_db)):
    return wrap(await LendingTypeService(session).list_active())


@lending_types_router.get("/by-code/{code}", response_model=DataResponse[LendingTypeOut])
async def get_lending_type_by_code(code: str, session: AsyncSession = Depends(get_db)):
    found = await LendingTypeService(session).get_by_code(code)
    if found is None:
        raise NotFoundError("LendingType", code)
    return wrap(found)


register_crud_routes(
    lending_types_router,
    service_class=LendingTypeService,
    create_schema=LendingTypeCreate,
    update_schema=LendingTypeUpdate,
    out_schema=LendingTypeOut,
    filter_schema=LendingTypeFilter,
)


# ------------------------------------------------------------------
# Products
# ------------------------------------------------------------------

@products_router.get("", response_model=DataResponse[list[ProductOut]])
async def list_products(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ProductService(session).list_for_distributor(distributor_id))


@products_router.get("/active", response_model=DataResponse[list[ProductOut]])
async def list_active_products(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await ProductService(session).list_active(distributor_id))


@products_router.get("/by-category/{category_id}", response_model=DataResponse[list[ProductOut]])
async def list_products_by_category(
    distributor_id: str, category_id: str, session: AsyncSession = Depends(get_db)
):
    return wrap(await ProductService(session).list_by_category(distributor_id, category_id))


register_crud_routes(
    products_router,
    service_class=ProductService,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    out_schema=ProductOut,
    filter_schema=ProductFilter,
    scope=distributor_scope,
)


# ------------------------------------------------------------------
# Lending configurations
# ------------------------------------------------------------------

@configurations_router.get("", response_model=DataResponse[list[LendingConfigurationOut]])
async def list_configurations(product_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingConfigurationService(session).list_for_product(product_id))


@configurations_router.get("/active", response_model=DataResponse[list[LendingConfigurationOut]])
async def list_active_configurations(product_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingConfigurationService(session).list_active_for_product(product_id))


@configurations_router.get("/default", response_model=DataResponse[LendingConfigurationOut])
async def get_default_configuration(product_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingConfigurationService(session).default_for_product(product_id))


register_crud_routes(
    configurations_router,
    service_class=LendingConfigurationService,
    create_schema=LendingConfigurationCreate,
    update_schema=LendingConfigurationUpdate,
    out_schema=LendingConfigurationOut,
    filter_schema=LendingConfigurationFilter,
    scope=product_scope,
)


@lending_types_configurations_router.get("", response_model=DataResponse[list[LendingConfigurationOut]])
async def list_configurations_by_lending_type(lending_type_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await LendingConfigurationService(session).list_by_lending_type(lending_type_id))


@distributor_configurations_router.get("", response_model=DataResponse[list[LendingConfigurationOut]])
async def list_distributor_configurations(
    distributor_id: str,
    active_only: bool = Query(default=False, alias="activeOnly"),
    session: AsyncSession = Depends(get_db),
):
    """Lending configurations of every product the distributor sells."""
    return wrap(
        await LendingConfigurationService(session).list_for_distributor(
            distributor_id, active_only=active_only
        )
    )

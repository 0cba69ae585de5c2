"""Terms-and-conditions template and distributor terms routers (including generation)."""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from distributor_mgmt.core.exceptions import NotFoundError
from distributor_mgmt.core.response import DataResponse, wrap
from distributor_mgmt.db.base import get_db
from distributor_mgmt.domain.enums import TermsStatus
from distributor_mgmt.routers.v1.crud import register_crud_routes
from distributor_mgmt.routers.v1.deps import current_actor, distributor_scope
from distributor_mgmt.schemas.terms import (
    DistributorTermsCreate,
    DistributorTermsFilter,
    DistributorTermsOut,
    DistributorTermsUpdate,
    GenerateTermsRequest,
    PreviewTermsOut,
    PreviewTermsRequest,
    TermsTemplateCreate,
    TermsTemplateFilter,
    TermsTemplateOut,
    TermsTemplateUpdate,
    VariableValidationOut,
)
from distributor_mgmt.services.terms import DistributorTermsService, TermsTemplateService
from distributor_mgmt.services.terms_generation import TermsGenerationService

templates_router = APIRouter(prefix="/terms-and-conditions-templates", tags=["Terms Templates"])
terms_router = APIRouter(
    prefix="/distributors/{distributor_id}/terms-and-conditions", tags=["Distributor Terms"]
)


# ------------------------------------------------------------------
# Templates: lookups
# ------------------------------------------------------------------

@templates_router.get("/active", response_model=DataResponse[list[TermsTemplateOut]])
async def list_active_templates(session: AsyncSession = Depends(get_db)):
    return wrap(await TermsTemplateService(session).list_active())


@templates_router.get("/by-category/{category}", response_model=DataResponse[list[TermsTemplateOut]])
async def list_templates_by_category(
    category: str,
    active_only: bool = Query(default=False, alias="activeOnly"),
    session: AsyncSession = Depends(get_db),
):
    svc = TermsTemplateService(session)
    if active_only:
        return wrap(await svc.list_active_by_category(category))
    return wrap(await svc.list_by_category(category))


@templates_router.get("/by-name/{name}", response_model=DataResponse[TermsTemplateOut])
async def get_template_by_name(name: str, session: AsyncSession = Depends(get_db)):
    found = await TermsTemplateService(session).get_by_name(name)
    if found is None:
        raise NotFoundError("TermsAndConditionsTemplate", name)
    return wrap(found)


@templates_router.get("/by-version/{version}", response_model=DataResponse[list[TermsTemplateOut]])
async def list_templates_by_version(version: str, session: AsyncSession = Depends(get_db)):
    return wrap(await TermsTemplateService(session).list_by_version(version))


@templates_router.get("/defaults", response_model=DataResponse[list[TermsTemplateOut]])
async def list_default_templates(session: AsyncSession = Depends(get_db)):
    return wrap(await TermsTemplateService(session).list_defaults())


@templates_router.get("/defaults/{category}", response_model=DataResponse[TermsTemplateOut])
async def get_default_template(category: str, session: AsyncSession = Depends(get_db)):
    found = await TermsTemplateService(session).default_for_category(category)
    if found is None:
        raise NotFoundError("Default TermsAndConditionsTemplate for category", category)
    return wrap(found)


@templates_router.get("/requiring-approval", response_model=DataResponse[list[TermsTemplateOut]])
async def list_templates_requiring_approval(session: AsyncSession = Depends(get_db)):
    return wrap(await TermsTemplateService(session).list_requiring_approval())


@templates_router.get("/auto-renewal", response_model=DataResponse[list[TermsTemplateOut]])
async def list_auto_renewal_templates(session: AsyncSession = Depends(get_db)):
    return wrap(await TermsTemplateService(session).list_auto_renewal())


@templates_router.get("/name-exists", response_model=DataResponse[bool])
async def template_name_exists(
    name: str,
    exclude_id: Optional[str] = Query(default=None, alias="excludeId"),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await TermsTemplateService(session).name_exists(name, exclude_id))


# ------------------------------------------------------------------
# Templates: transitions and rendering
# ------------------------------------------------------------------

@templates_router.post("/{entity_id}/activate", response_model=DataResponse[TermsTemplateOut])
async def activate_template(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await TermsTemplateService(session).activate(entity_id, actor))


@templates_router.post("/{entity_id}/deactivate", response_model=DataResponse[TermsTemplateOut])
async def deactivate_template(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await TermsTemplateService(session).deactivate(entity_id, actor))


@templates_router.post("/{entity_id}/set-default", response_model=DataResponse[TermsTemplateOut])
async def set_default_template(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    """Make this the default of its category; other active defaults are cleared."""
    return wrap(await TermsTemplateService(session).set_default(entity_id, actor))


@templates_router.post("/{entity_id}/remove-default", response_model=DataResponse[TermsTemplateOut])
async def remove_default_template(
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await TermsTemplateService(session).remove_default(entity_id, actor))


@templates_router.post("/{entity_id}/preview", response_model=DataResponse[PreviewTermsOut])
async def preview_template(
    entity_id: str,
    body: PreviewTermsRequest,
    session: AsyncSession = Depends(get_db),
):
    content = await TermsGenerationService(session).preview(entity_id, body.variables)
    return wrap(PreviewTermsOut(template_id=entity_id, content=content))


@templates_router.post("/{entity_id}/validate-variables", response_model=DataResponse[VariableValidationOut])
async def validate_template_variables(
    entity_id: str,
    body: PreviewTermsRequest,
    session: AsyncSession = Depends(get_db),
):
    template = await TermsTemplateService(session).require(entity_id)
    errors = TermsGenerationService(session).validate(template, body.variables)
    return wrap(VariableValidationOut(valid=not errors, errors=errors))


register_crud_routes(
    templates_router,
    service_class=TermsTemplateService,
    create_schema=TermsTemplateCreate,
    update_schema=TermsTemplateUpdate,
    out_schema=TermsTemplateOut,
    filter_schema=TermsTemplateFilter,
)


# ------------------------------------------------------------------
# Distributor terms: lookups
# ------------------------------------------------------------------

@terms_router.get("", response_model=DataResponse[list[DistributorTermsOut]])
async def list_terms(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorTermsService(session).list_for_distributor(distributor_id))


@terms_router.get("/active", response_model=DataResponse[list[DistributorTermsOut]])
async def list_active_terms(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorTermsService(session).list_active(distributor_id))


@terms_router.get("/latest-active", response_model=DataResponse[DistributorTermsOut])
async def get_latest_active_terms(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorTermsService(session).latest_active(distributor_id))


@terms_router.get("/has-active-signed", response_model=DataResponse[bool])
async def has_active_signed_terms(distributor_id: str, session: AsyncSession = Depends(get_db)):
    return wrap(await DistributorTermsService(session).has_active_signed(distributor_id))


@terms_router.get("/expiring", response_model=DataResponse[list[DistributorTermsOut]])
async def list_expiring_terms(
    distributor_id: str,
    before: datetime,
    session: AsyncSession = Depends(get_db),
):
    """Active terms whose expiration date falls before ``before``."""
    return wrap(await DistributorTermsService(session).list_expiring_before(distributor_id, before))


@terms_router.get("/by-status/{terms_status}", response_model=DataResponse[list[DistributorTermsOut]])
async def list_terms_by_status(
    distributor_id: str, terms_status: TermsStatus, session: AsyncSession = Depends(get_db)
):
    return wrap(await DistributorTermsService(session).list_by_status(distributor_id, terms_status))


@terms_router.get("/by-template/{template_id}", response_model=DataResponse[list[DistributorTermsOut]])
async def list_terms_by_template(
    distributor_id: str, template_id: str, session: AsyncSession = Depends(get_db)
):
    return wrap(await DistributorTermsService(session).list_by_template(distributor_id, template_id))


# ------------------------------------------------------------------
# Distributor terms: generation and transitions
# ------------------------------------------------------------------

@terms_router.post(
    "/generate",
    response_model=DataResponse[DistributorTermsOut],
    status_code=status.HTTP_201_CREATED,
)
async def generate_terms(
    distributor_id: str,
    body: GenerateTermsRequest,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    """Render a template for this distributor and store it as DRAFT terms."""
    return wrap(
        await TermsGenerationService(session).generate(
            body.template_id, distributor_id, body.variables, actor
        )
    )


@terms_router.patch("/{entity_id}/status", response_model=DataResponse[DistributorTermsOut])
async def update_terms_status(
    distributor_id: str,
    entity_id: str,
    terms_status: TermsStatus = Query(alias="status"),
    updated_by: Optional[str] = Query(default=None, alias="updatedBy"),
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorTermsService(session).update_status(
            entity_id, terms_status, updated_by or actor, distributor_scope(distributor_id)
        )
    )


@terms_router.post("/{entity_id}/sign", response_model=DataResponse[DistributorTermsOut])
async def sign_terms(
    distributor_id: str,
    entity_id: str,
    signed_by: Optional[str] = Query(default=None, alias="signedBy"),
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(
        await DistributorTermsService(session).sign(
            entity_id, signed_by or actor, distributor_scope(distributor_id)
        )
    )


@terms_router.post("/{entity_id}/activate", response_model=DataResponse[DistributorTermsOut])
async def activate_terms(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await DistributorTermsService(session).activate(entity_id, actor, distributor_scope(distributor_id)))


@terms_router.post("/{entity_id}/deactivate", response_model=DataResponse[DistributorTermsOut])
async def deactivate_terms(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    return wrap(await DistributorTermsService(session).deactivate(entity_id, actor, distributor_scope(distributor_id)))


@terms_router.get("/{entity_id}/needs-renewal", response_model=DataResponse[bool])
async def terms_need_renewal(
    distributor_id: str, entity_id: str, session: AsyncSession = Depends(get_db)
):
    return wrap(
        await TermsGenerationService(session).needs_renewal(entity_id, distributor_scope(distributor_id))
    )


@terms_router.post(
    "/{entity_id}/auto-renew",
    response_model=DataResponse[DistributorTermsOut],
    status_code=status.HTTP_201_CREATED,
)
async def auto_renew_terms(
    distributor_id: str,
    entity_id: str,
    actor: Optional[str] = Depends(current_actor),
    session: AsyncSession = Depends(get_db),
):
    """Generate a fresh DRAFT from the same auto-renewing template."""
    return wrap(
        await TermsGenerationService(session).auto_renew(
            entity_id, actor, distributor_scope(distributor_id)
        )
    )


register_crud_routes(
    terms_router,
    service_class=DistributorTermsService,
    create_schema=DistributorTermsCreate,
    update_schema=DistributorTermsUpdate,
    out_schema=DistributorTermsOut,
    filter_schema=DistributorTermsFilter,
    scope=distributor_scope,
)

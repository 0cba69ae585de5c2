"""Distributor Management API — FastAPI application factory.

Run locally with ``uvicorn distributor_mgmt.main:app --reload``.
"""

import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from distributor_mgmt.core.config import settings
from distributor_mgmt.core.exceptions import register_exception_handlers
from distributor_mgmt.db.base import dispose_engine
from distributor_mgmt.middleware.audit import AuditMiddleware
from distributor_mgmt.routers.v1 import ROUTERS as V1_ROUTERS
from distributor_mgmt.schemas.common import HealthResponse

logger = logging.getLogger(__name__)

_QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "httpcore", "httpx")


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if settings.is_development else logging.INFO,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    logger.info("%s starting (env=%s)", settings.app_name, settings.app_env)
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    _configure_logging()

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )
    # Records writes under /distributors/{id} to distributor_audit_log
    app.add_middleware(AuditMiddleware)

    register_exception_handlers(app)

    for router in V1_ROUTERS:
        app.include_router(router, prefix=settings.api_v1_prefix)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


app = create_app()

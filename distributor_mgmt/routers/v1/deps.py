"""Shared FastAPI dependencies for v1 routers."""

from fastapi import Request

from distributor_mgmt.core.config import settings


def current_actor(request: Request) -> str | None:
    """Acting user id, taken from the configured actor header (X-User-Id by default)."""
    return request.headers.get(settings.actor_header) or None


# Scope dependencies: the parent key a nested resource is addressed under.
# FastAPI fills the argument from the router prefix's path parameter.

def distributor_scope(distributor_id: str) -> dict:
    return {"distributor_id": distributor_id}


def agency_scope(agency_id: str) -> dict:
    return {"agency_id": agency_id}


def product_scope(product_id: str) -> dict:
    return {"product_id": product_id}


def no_scope() -> None:
    return None

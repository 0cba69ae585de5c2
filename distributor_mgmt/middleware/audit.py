"""Audit logging middleware: records state-changing distributor requests to distributor_audit_log."""

from __future__ import annotations

import asyncio
import json
import logging
import re
import time
from collections.abc import Callable
from dataclasses import dataclass, replace

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from distributor_mgmt.core.config import settings
from distributor_mgmt.db.base import get_session
from distributor_mgmt.domain.audit import DistributorAuditLog
from distributor_mgmt.domain.enums import DistributorAction

logger = logging.getLogger(__name__)

# Methods that mutate state
_WRITE_METHODS = {
    "POST": DistributorAction.CREATED,
    "PUT": DistributorAction.UPDATED,
    "PATCH": DistributorAction.UPDATED,
    "DELETE": DistributorAction.TERMINATED,
}
_ID_RE = re.compile(r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$")


@dataclass(frozen=True)
class AuditTarget:
    # None until the response of POST /distributors names the new row
    distributor_id: str | None
    action: DistributorAction
    entity: str
    entity_id: str | None


def _audit_target(path: str, method: str) -> AuditTarget | None:
    """Work out which distributor a write request touches, if any.

    /api/v1/distributors (POST)                  → ("distributor", id from the response)
    /api/v1/distributors/{id}                    → ("distributor", id)
    /api/v1/distributors/{id}/products/{pid}     → ("products", pid)
    /api/v1/distributors/{id}/terms-and-conditions/{tid}/sign (POST) → UPDATED
    """
    action = _WRITE_METHODS.get(method.upper())
    if action is None:
        return None

    parts = [p for p in path.strip("/").split("/") if p]
    if "distributors" not in parts:
        return None
    rest = parts[parts.index("distributors") + 1:]
    if not rest:
        if action is DistributorAction.CREATED:
            return AuditTarget(None, action, "distributor", None)
        return None
    if not _ID_RE.match(rest[0]):
        return None
    distributor_id, rest = rest[0], rest[1:]

    if not rest:
        return AuditTarget(distributor_id, action, "distributor", distributor_id)
    if rest[0] == "audit-logs":
        return None

    entity_id = rest[1] if len(rest) > 1 and _ID_RE.match(rest[1]) else None
    if action is DistributorAction.CREATED and entity_id is not None:
        # POST on an existing row is a transition (sign, activate, ...)
        action = DistributorAction.UPDATED
    elif action is DistributorAction.TERMINATED:
        # Removing a child row changes the distributor; only its own DELETE terminates it
        action = DistributorAction.UPDATED
    return AuditTarget(distributor_id, action, rest[0], entity_id)


async def _buffer_body(response: Response) -> tuple[Response, bytes]:
    """Read a streamed response body and hand back an equivalent response."""
    body = getattr(response, "body", None)
    if body is not None:
        return response, body
    body = b"".join([chunk async for chunk in response.body_iterator])
    buffered = Response(
        content=body,
        status_code=response.status_code,
        headers=dict(response.headers),
        media_type=response.media_type,
    )
    return buffered, body


def _created_id(body: bytes) -> str | None:
    try:
        return json.loads(body)["data"]["id"]
    except (ValueError, KeyError, TypeError):
        return None


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations.

    Successful writes under /distributors/{id}, and the creation of a distributor,
    also get a DistributorAuditLog row, written asynchronously AFTER the response
    is sent so it never adds latency to the request. Failures in audit persistence
    are logged and never raise to the caller.
    """

    def __init__(self, app, persist: bool | None = None):
        super().__init__(app)
        self._persist = settings.audit_persist_enabled if persist is None else persist
        self._pending: set[asyncio.Task] = set()

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            logger.info(
                "%s %s → %s (%sms)",
                request.method, request.url.path, response.status_code, duration_ms,
            )
            target = _audit_target(request.url.path, request.method)
            if self._persist and target is not None and response.status_code < 400:
                if target.distributor_id is None:
                    response, body = await _buffer_body(response)
                    created_id = _created_id(body)
                    if created_id is None:
                        logger.warning("No id in response of %s %s", request.method, request.url.path)
                        return response
                    target = replace(target, distributor_id=created_id, entity_id=created_id)
                # Fire-and-forget: don't await here so the response is not delayed
                task = asyncio.create_task(self._record(request, target, response.status_code))
                self._pending.add(task)
                task.add_done_callback(self._pending.discard)

        return response

    async def _record(self, request: Request, target: AuditTarget, status_code: int) -> None:
        """Persist an audit row. Logs and drops the row on failure."""
        try:
            async with get_session() as session:
                session.add(
                    DistributorAuditLog(
                        distributor_id=target.distributor_id,
                        user_id=request.headers.get(settings.actor_header),
                        ip_address=request.client.host if request.client else None,
                        action=target.action,
                        entity=target.entity,
                        entity_id=target.entity_id,
                        metadata_json={
                            "method": request.method,
                            "path": request.url.path,
                            "status": status_code,
                            "userAgent": request.headers.get("user-agent"),
                        },
                    )
                )
        except Exception:
            logger.exception("Failed to persist audit row for %s %s", request.method, request.url.path)

"""Audit rows written by the middleware, and the audit-log endpoints over HTTP."""

import asyncio
import json
import uuid
from contextlib import asynccontextmanager

import pytest
from httpx import AsyncClient
from sqlalchemy import select
from starlette.requests import Request
from starlette.responses import Response, StreamingResponse

from distributor_mgmt.domain.audit import DistributorAuditLog
from distributor_mgmt.domain.enums import DistributorAction
from distributor_mgmt.middleware import audit as audit_middleware
from distributor_mgmt.middleware.audit import AuditMiddleware
from tests.conftest import ACTOR, API


async def _noop_app(scope, receive, send):
    pass


def _request(method: str, path: str) -> Request:
    return Request(
        {
            "type": "http",
            "method": method,
            "path": path,
            "query_string": b"",
            "headers": [(b"x-user-id", ACTOR.encode()), (b"user-agent", b"pytest")],
            "client": ("10.0.0.7", 5123),
            "server": ("test", 80),
            "scheme": "http",
        }
    )


@pytest.fixture
def audited(monkeypatch, session_factory) -> AuditMiddleware:
    """Middleware with persistence on, writing through the test engine."""

    @asynccontextmanager
    async def test_session():
        async with session_factory() as session:
            yield session
            await session.commit()

    monkeypatch.setattr(audit_middleware, "get_session", test_session)
    return AuditMiddleware(_noop_app, persist=True)


async def _dispatch(middleware: AuditMiddleware, request: Request, response: Response) -> Response:
    async def call_next(_request):
        return response

    result = await middleware.dispatch(request, call_next)
    await asyncio.gather(*middleware._pending)
    return result


async def _rows(session_factory) -> list[DistributorAuditLog]:
    async with session_factory() as session:
        return list((await session.execute(select(DistributorAuditLog))).scalars().all())


async def test_distributor_update_writes_one_audit_row(audited, session_factory):
    distributor_id = str(uuid.uuid4())

    await _dispatch(audited, _request("PUT", f"{API}/distributors/{distributor_id}"), Response(status_code=200))

    rows = await _rows(session_factory)
    assert len(rows) == 1
    row = rows[0]
    assert row.distributor_id == distributor_id
    assert row.action == DistributorAction.UPDATED
    assert row.entity == "distributor"
    assert row.entity_id == distributor_id
    assert row.user_id == ACTOR
    assert row.ip_address == "10.0.0.7"
    assert row.metadata_json["status"] == 200


async def test_distributor_create_is_audited_with_the_new_id(audited, session_factory):
    new_id = str(uuid.uuid4())
    body = json.dumps({"data": {"id": new_id, "name": "Acme"}}).encode()
    streamed = StreamingResponse(iter([body]), status_code=201, media_type="application/json")

    response = await _dispatch(audited, _request("POST", f"{API}/distributors"), streamed)

    assert response.status_code == 201
    assert response.body == body
    rows = await _rows(session_factory)
    assert [(r.action, r.entity, r.entity_id) for r in rows] == [
        (DistributorAction.CREATED, "distributor", new_id)
    ]


async def test_failed_and_unscoped_writes_are_not_persisted(audited, session_factory):
    distributor_id = str(uuid.uuid4())

    await _dispatch(audited, _request("PUT", f"{API}/distributors/{distributor_id}"), Response(status_code=409))
    await _dispatch(audited, _request("POST", f"{API}/product-categories"), Response(status_code=201))

    assert await _rows(session_factory) == []


async def test_create_and_filter_audit_logs(client: AsyncClient, distributor: dict):
    base = f"{API}/distributors/{distributor['id']}/audit-logs"
    for action, entity in (("UPDATED", "branding"), ("UPDATED", "products"), ("TERMINATED", "distributor")):
        resp = await client.post(
            base, json={"action": action, "entity": entity, "userId": ACTOR, "metadata": {"source": "import"}}
        )
        assert resp.status_code == 201, resp.text

    created = resp.json()["data"]
    assert created["distributorId"] == distributor["id"]
    assert created["metadata"] == {"source": "import"}
    assert created["timestamp"] is not None

    resp = await client.post(
        f"{base}/filter",
        json={"filters": {"action": "UPDATED"}, "pagination": {"sort": [{"field": "entity", "direction": "asc"}]}},
    )

    page = resp.json()
    assert page["totalElements"] == 2
    assert [log["entity"] for log in page["content"]] == ["branding", "products"]


async def test_audit_logs_are_scoped_to_their_distributor(client: AsyncClient, distributor: dict):
    other = (await client.post(f"{API}/distributors", json={"name": "Other"})).json()["data"]
    created = (
        await client.post(
            f"{API}/distributors/{distributor['id']}/audit-logs", json={"action": "UPDATED"}
        )
    ).json()["data"]

    resp = await client.get(f"{API}/distributors/{other['id']}/audit-logs/{created['id']}")

    assert resp.status_code == 404

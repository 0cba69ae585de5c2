"""Distributor CRUD, filtering, optimistic locking and nested scoping over HTTP."""

from httpx import AsyncClient

from tests.conftest import ACTOR, API

OTHER_USER = "22222222-2222-2222-2222-222222222222"
MISSING = "00000000-0000-0000-0000-000000000000"


async def _create(client: AsyncClient, **body) -> dict:
    resp = await client.post(f"{API}/distributors", json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


async def test_health(client: AsyncClient):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


async def test_create_then_get(client: AsyncClient):
    created = await _create(client, name="Acme Leasing", countryId="MX")

    resp = await client.get(f"{API}/distributors/{created['id']}")

    assert resp.status_code == 200
    data = resp.json()["data"]
    assert data["name"] == "Acme Leasing"
    assert data["isActive"] is True
    assert data["isTestDistributor"] is False
    assert data["lockVersion"] == 1
    assert data["createdBy"] == ACTOR


async def test_get_missing_is_404(client: AsyncClient):
    resp = await client.get(f"{API}/distributors/{MISSING}")
    assert resp.status_code == 404
    assert resp.json()["error"]["code"] == "NOT_FOUND"


async def test_update_preserves_creation_audit(client: AsyncClient, distributor: dict):
    resp = await client.put(
        f"{API}/distributors/{distributor['id']}",
        json={"name": "Acme Renamed", "lockVersion": 1},
        headers={"X-User-Id": OTHER_USER},
    )

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["name"] == "Acme Renamed"
    assert data["createdAt"] == distributor["createdAt"]
    assert data["createdBy"] == ACTOR
    assert data["updatedBy"] == OTHER_USER
    assert data["lockVersion"] == 2


async def test_stale_lock_version_is_409(client: AsyncClient, distributor: dict):
    url = f"{API}/distributors/{distributor['id']}"
    first = await client.put(url, json={"name": "First", "lockVersion": 1})
    assert first.status_code == 200

    second = await client.put(url, json={"name": "Second", "lockVersion": 1})

    assert second.status_code == 409
    assert second.json()["error"]["code"] == "CONFLICT"
    current = (await client.get(url)).json()["data"]
    assert current["name"] == "First"


async def test_update_and_delete_missing_are_404(client: AsyncClient):
    put = await client.put(f"{API}/distributors/{MISSING}", json={"name": "Ghost"})
    delete = await client.delete(f"{API}/distributors/{MISSING}")
    assert put.status_code == 404
    assert delete.status_code == 404


async def test_delete_removes_row(client: AsyncClient, distributor: dict):
    url = f"{API}/distributors/{distributor['id']}"
    assert (await client.delete(url)).status_code == 204
    assert (await client.get(url)).status_code == 404


async def test_create_requires_name(client: AsyncClient):
    resp = await client.post(f"{API}/distributors", json={"countryId": "MX"})
    assert resp.status_code == 422


async def test_activate_and_deactivate(client: AsyncClient, distributor: dict):
    url = f"{API}/distributors/{distributor['id']}"
    off = await client.post(f"{url}/deactivate")
    assert off.json()["data"]["isActive"] is False
    on = await client.post(f"{url}/activate")
    assert on.json()["data"]["isActive"] is True
    assert on.json()["data"]["lockVersion"] == 3


# ---------------------------------------------------------------------------
# /filter
# ---------------------------------------------------------------------------

async def test_filter_empty_criteria_returns_everything(client: AsyncClient):
    for name, country in (("Alpha", "MX"), ("Beta", "MX"), ("Gamma", "CO")):
        await _create(client, name=name, countryId=country)

    resp = await client.post(f"{API}/distributors/filter", json={})

    assert resp.status_code == 200
    page = resp.json()
    assert page["totalElements"] == 3
    assert page["totalPages"] == 1
    assert page["page"] == 0
    assert page["size"] == 20
    assert len(page["content"]) == 3


async def test_filter_by_single_criterion_and_sort(client: AsyncClient):
    for name, country in (("Beta", "MX"), ("Alpha", "MX"), ("Gamma", "CO")):
        await _create(client, name=name, countryId=country)

    resp = await client.post(
        f"{API}/distributors/filter",
        json={
            "filters": {"countryId": "MX"},
            "pagination": {"sort": [{"field": "name", "direction": "asc"}]},
        },
    )

    page = resp.json()
    assert page["totalElements"] == 2
    assert [d["name"] for d in page["content"]] == ["Alpha", "Beta"]


async def test_filter_prefix_is_case_insensitive(client: AsyncClient):
    await _create(client, name="Northwind")
    await _create(client, name="Southwind")

    resp = await client.post(f"{API}/distributors/filter", json={"filters": {"name": "north"}})

    assert [d["name"] for d in resp.json()["content"]] == ["Northwind"]


async def test_filter_out_of_range_page_is_empty(client: AsyncClient):
    for name in ("A", "B", "C"):
        await _create(client, name=name)

    resp = await client.post(
        f"{API}/distributors/filter", json={"pagination": {"pageNumber": 5, "pageSize": 2}}
    )

    assert resp.status_code == 200
    page = resp.json()
    assert page["content"] == []
    assert page["totalElements"] == 3
    assert page["totalPages"] == 2
    assert page["page"] == 5


async def test_filter_rejects_oversized_page(client: AsyncClient):
    resp = await client.post(f"{API}/distributors/filter", json={"pagination": {"pageSize": 10_000}})
    assert resp.status_code == 422


# ---------------------------------------------------------------------------
# Nested resources
# ---------------------------------------------------------------------------

async def test_nested_resource_outside_parent_is_404(client: AsyncClient):
    owner = await _create(client, name="Owner")
    stranger = await _create(client, name="Stranger")
    resp = await client.post(
        f"{API}/distributors/{owner['id']}/branding", json={"primaryColor": "#112233", "theme": "DARK"}
    )
    assert resp.status_code == 201, resp.text
    branding = resp.json()["data"]
    assert branding["distributorId"] == owner["id"]
    assert branding["theme"] == "DARK"

    wrong = await client.get(f"{API}/distributors/{stranger['id']}/branding/{branding['id']}")
    right = await client.get(f"{API}/distributors/{owner['id']}/branding/{branding['id']}")

    assert wrong.status_code == 404
    assert right.status_code == 200


async def test_nested_filter_is_scoped_to_parent(client: AsyncClient):
    first = await _create(client, name="First")
    second = await _create(client, name="Second")
    for dist in (first, second):
        resp = await client.post(f"{API}/distributors/{dist['id']}/operations", json={"countryId": "MX"})
        assert resp.status_code == 201, resp.text

    resp = await client.post(f"{API}/distributors/{first['id']}/operations/filter", json={})

    content = resp.json()["content"]
    assert len(content) == 1
    assert content[0]["distributorId"] == first["id"]


async def test_can_operate(client: AsyncClient, distributor: dict):
    base = f"{API}/distributors/{distributor['id']}/operations"
    await client.post(base, json={"countryId": "MX", "administrativeDivisionId": "JAL"})

    yes = await client.get(f"{base}/can-operate", params={"countryId": "MX", "administrativeDivisionId": "JAL"})
    no = await client.get(f"{base}/can-operate", params={"countryId": "CO"})

    assert yes.json()["data"]["canOperate"] is True
    assert no.json()["data"]["canOperate"] is False


async def test_simulation_status_update(client: AsyncClient, distributor: dict):
    base = f"{API}/distributors/{distributor['id']}/simulations"
    created = (await client.post(base, json={"applicationId": "app-1"})).json()["data"]
    assert created["simulationStatus"] == "PENDING"

    resp = await client.patch(f"{base}/{created['id']}/status", params={"status": "COMPLETED"})

    assert resp.json()["data"]["simulationStatus"] == "COMPLETED"
    listed = await client.get(f"{base}/by-status/COMPLETED")
    assert [s["id"] for s in listed.json()["data"]] == [created["id"]]

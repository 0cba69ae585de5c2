"""Agencies, agents, assignments and agency payment methods over HTTP."""

from httpx import AsyncClient

from tests.conftest import ACTOR, API


def _methods_url(agency: dict) -> str:
    return f"{API}/agencies/{agency['id']}/payment-methods"


async def _method(client: AsyncClient, agency: dict, **body) -> dict:
    resp = await client.post(_methods_url(agency), json={"paymentMethodType": "BANK_TRANSFER", **body})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


async def test_agency_is_scoped_to_distributor(client: AsyncClient, distributor: dict, agency: dict):
    assert agency["distributorId"] == distributor["id"]
    assert agency["isActive"] is True

    resp = await client.post(
        f"{API}/distributors/{distributor['id']}/agencies/filter", json={"filters": {"code": "DT-01"}}
    )
    assert [a["id"] for a in resp.json()["content"]] == [agency["id"]]


async def test_agent_assignment_defaults(client: AsyncClient, distributor: dict, agency: dict):
    base = f"{API}/distributors/{distributor['id']}"
    agent = (
        await client.post(f"{base}/agents", json={"firstName": "Ana", "lastName": "Ruiz"})
    ).json()["data"]

    resp = await client.post(
        f"{base}/agent-assignments", json={"agentId": agent["id"], "agencyId": agency["id"]}
    )

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["isPrimaryAgency"] is False
    assert data["assignedAt"] is not None


async def test_payment_method_metadata_round_trip(client: AsyncClient, agency: dict):
    method = await _method(client, agency, metadata={"source": "import", "batch": 7})

    resp = await client.get(f"{_methods_url(agency)}/{method['id']}")

    data = resp.json()["data"]
    assert data["metadata"] == {"source": "import", "batch": 7}
    assert data["agencyId"] == agency["id"]
    assert data["isPrimary"] is False
    assert data["isVerified"] is False


async def test_only_one_primary_payment_method(client: AsyncClient, agency: dict):
    first = await _method(client, agency, isPrimary=True)
    second = await _method(client, agency, isPrimary=True)

    primary = await client.get(f"{_methods_url(agency)}/primary")
    assert primary.json()["data"]["id"] == second["id"]
    refreshed = (await client.get(f"{_methods_url(agency)}/{first['id']}")).json()["data"]
    assert refreshed["isPrimary"] is False
    assert refreshed["lockVersion"] == 2


async def test_set_primary_switches(client: AsyncClient, agency: dict):
    first = await _method(client, agency, isPrimary=True)
    second = await _method(client, agency)

    resp = await client.post(f"{_methods_url(agency)}/{second['id']}/set-primary")

    assert resp.json()["data"]["isPrimary"] is True
    refreshed = (await client.get(f"{_methods_url(agency)}/{first['id']}")).json()["data"]
    assert refreshed["isPrimary"] is False


async def test_verify_payment_method(client: AsyncClient, agency: dict):
    method = await _method(client, agency)

    resp = await client.post(f"{_methods_url(agency)}/{method['id']}/verify")

    data = resp.json()["data"]
    assert data["isVerified"] is True
    assert data["verifiedBy"] == ACTOR
    assert data["verifiedAt"] is not None


async def test_no_primary_is_404(client: AsyncClient, agency: dict):
    resp = await client.get(f"{_methods_url(agency)}/primary")
    assert resp.status_code == 404

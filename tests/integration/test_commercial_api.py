"""Authorized territories, distributor contracts and product catalog over HTTP."""

from httpx import AsyncClient

from tests.conftest import API

MISSING = "00000000-0000-0000-0000-000000000000"


def _url(distributor: dict, resource: str) -> str:
    return f"{API}/distributors/{distributor['id']}/{resource}"


async def test_territory_crud_is_scoped_to_distributor(client: AsyncClient, distributor: dict):
    other = (await client.post(f"{API}/distributors", json={"name": "Other"})).json()["data"]
    created = await client.post(
        _url(distributor, "authorized-territories"),
        json={"countryId": "MX", "authorizationLevel": "COUNTRY", "authorizedFrom": "2025-01-01T00:00:00"},
    )
    assert created.status_code == 201, created.text
    territory = created.json()["data"]
    assert territory["distributorId"] == distributor["id"]
    assert territory["isActive"] is True

    assert (await client.get(f"{_url(other, 'authorized-territories')}/{territory['id']}")).status_code == 404
    assert (await client.delete(f"{_url(other, 'authorized-territories')}/{territory['id']}")).status_code == 404

    resp = await client.delete(f"{_url(distributor, 'authorized-territories')}/{territory['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"{_url(distributor, 'authorized-territories')}/{territory['id']}")).status_code == 404


async def test_filter_territories_by_level(client: AsyncClient, distributor: dict):
    for country, level in (("MX", "COUNTRY"), ("CO", "REGION"), ("PE", "COUNTRY")):
        await client.post(
            _url(distributor, "authorized-territories"), json={"countryId": country, "authorizationLevel": level}
        )

    resp = await client.post(
        f"{_url(distributor, 'authorized-territories')}/filter",
        json={
            "filters": {"authorizationLevel": "COUNTRY"},
            "pagination": {"sort": [{"field": "countryId", "direction": "asc"}]},
        },
    )

    page = resp.json()
    assert page["totalElements"] == 2
    assert [t["countryId"] for t in page["content"]] == ["MX", "PE"]


async def test_territory_notes_length_is_validated(client: AsyncClient, distributor: dict):
    resp = await client.post(
        _url(distributor, "authorized-territories"), json={"countryId": "MX", "notes": "x" * 501}
    )
    assert resp.status_code == 422


async def test_distributor_contract_round_trip(client: AsyncClient, distributor: dict):
    body = {
        "contractNumber": "DC-2025-01",
        "contractType": "FRAMEWORK",
        "title": "Master distribution agreement",
        "startDate": "2025-01-01",
        "endDate": "2026-12-31",
        "contractValue": "150000.00",
        "currencyCode": "MXN",
        "metadata": {"region": "north"},
    }
    created = await client.post(_url(distributor, "contracts"), json=body)
    assert created.status_code == 201, created.text
    contract = created.json()["data"]
    assert contract["metadata"] == {"region": "north"}

    resp = await client.put(
        f"{_url(distributor, 'contracts')}/{contract['id']}",
        json={**body, "status": "ACTIVE", "lockVersion": 1},
    )

    assert resp.status_code == 200, resp.text
    updated = resp.json()["data"]
    assert updated["status"] == "ACTIVE"
    assert updated["createdAt"] == contract["createdAt"]
    assert updated["lockVersion"] == 2


async def test_distributor_contract_requires_dates(client: AsyncClient, distributor: dict):
    resp = await client.post(
        _url(distributor, "contracts"),
        json={"contractNumber": "DC-1", "contractType": "FRAMEWORK", "title": "No dates"},
    )
    assert resp.status_code == 422


async def test_update_missing_distributor_contract_is_404(client: AsyncClient, distributor: dict):
    resp = await client.put(
        f"{_url(distributor, 'contracts')}/{MISSING}",
        json={
            "contractNumber": "DC-1",
            "contractType": "FRAMEWORK",
            "title": "Ghost",
            "startDate": "2025-01-01",
            "endDate": "2025-12-31",
        },
    )
    assert resp.status_code == 404


async def test_product_catalog_filter(client: AsyncClient, distributor: dict, product: dict):
    for code, featured, order in (("CAT-2", False, 2), ("CAT-1", True, 1)):
        resp = await client.post(
            _url(distributor, "product-catalog"),
            json={
                "productId": product["id"],
                "catalogCode": code,
                "isFeatured": featured,
                "displayOrder": order,
                "metadata": {"badge": code},
            },
        )
        assert resp.status_code == 201, resp.text

    everything = (await client.post(f"{_url(distributor, 'product-catalog')}/filter", json={})).json()
    assert [c["catalogCode"] for c in everything["content"]] == ["CAT-1", "CAT-2"]

    featured = (
        await client.post(f"{_url(distributor, 'product-catalog')}/filter", json={"filters": {"isFeatured": True}})
    ).json()
    assert featured["totalElements"] == 1
    assert featured["content"][0]["metadata"] == {"badge": "CAT-1"}

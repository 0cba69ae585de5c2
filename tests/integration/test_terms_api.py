"""Terms templates, distributor terms, generation and signing over HTTP."""

from httpx import AsyncClient

from tests.conftest import API

TEMPLATES = f"{API}/terms-and-conditions-templates"


async def _template(client: AsyncClient, **overrides) -> dict:
    body = {
        "name": "Standard Leasing",
        "category": "LEASING",
        "version": "1.0",
        "templateContent": "Agreement with {{distributorName}}. Monthly fee: {{monthlyFee}}.",
        "variables": {
            "distributorName": {"type": "string", "required": True},
            "monthlyFee": {"type": "number", "required": True},
        },
    }
    body.update(overrides)
    resp = await client.post(TEMPLATES, json=body)
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


def _terms_url(distributor: dict) -> str:
    return f"{API}/distributors/{distributor['id']}/terms-and-conditions"


async def test_template_defaults(client: AsyncClient):
    template = await _template(client)
    assert template["isActive"] is True
    assert template["isDefault"] is False
    assert template["approvalRequired"] is True
    assert template["autoRenewal"] is False


async def test_duplicate_template_name_is_409(client: AsyncClient):
    await _template(client)

    resp = await client.post(TEMPLATES, json={"name": "Standard Leasing", "templateContent": "x"})

    assert resp.status_code == 409
    assert resp.json()["error"]["code"] == "CONFLICT"


async def test_template_can_keep_its_own_name_on_update(client: AsyncClient):
    template = await _template(client)

    resp = await client.put(
        f"{TEMPLATES}/{template['id']}",
        json={"name": "Standard Leasing", "templateContent": "Updated", "lockVersion": 1},
    )

    assert resp.status_code == 200, resp.text
    assert resp.json()["data"]["templateContent"] == "Updated"


async def test_name_exists(client: AsyncClient):
    template = await _template(client)

    taken = await client.get(f"{TEMPLATES}/name-exists", params={"name": "Standard Leasing"})
    own = await client.get(
        f"{TEMPLATES}/name-exists", params={"name": "Standard Leasing", "excludeId": template["id"]}
    )

    assert taken.json()["data"] is True
    assert own.json()["data"] is False


async def test_set_default_clears_previous_default(client: AsyncClient):
    first = await _template(client, name="First")
    second = await _template(client, name="Second")

    await client.post(f"{TEMPLATES}/{first['id']}/set-default")
    await client.post(f"{TEMPLATES}/{second['id']}/set-default")

    resp = await client.get(f"{TEMPLATES}/defaults/LEASING")
    assert resp.json()["data"]["id"] == second["id"]
    refreshed = (await client.get(f"{TEMPLATES}/{first['id']}")).json()["data"]
    assert refreshed["isDefault"] is False


async def test_creating_a_default_template_replaces_the_old_default(client: AsyncClient):
    first = await _template(client, name="First")
    await client.post(f"{TEMPLATES}/{first['id']}/set-default")

    second = await _template(client, name="Second", isDefault=True)

    defaults = (await client.get(f"{TEMPLATES}/defaults")).json()["data"]
    assert [t["id"] for t in defaults] == [second["id"]]
    refreshed = (await client.get(f"{TEMPLATES}/{first['id']}")).json()["data"]
    assert refreshed["isDefault"] is False


async def test_updating_a_template_to_default_replaces_the_old_default(client: AsyncClient):
    first = await _template(client, name="First", isDefault=True)
    second = await _template(client, name="Second")

    resp = await client.put(
        f"{TEMPLATES}/{second['id']}",
        json={
            "name": "Second",
            "category": "LEASING",
            "templateContent": second["templateContent"],
            "isDefault": True,
            "isActive": True,
            "lockVersion": 1,
        },
    )
    assert resp.status_code == 200, resp.text

    resp = await client.get(f"{TEMPLATES}/defaults/LEASING")
    assert resp.json()["data"]["id"] == second["id"]
    refreshed = (await client.get(f"{TEMPLATES}/{first['id']}")).json()["data"]
    assert refreshed["isDefault"] is False


async def test_preview_leaves_unknown_placeholders(client: AsyncClient):
    template = await _template(client)

    resp = await client.post(
        f"{TEMPLATES}/{template['id']}/preview", json={"variables": {"distributorName": "Acme"}}
    )

    assert resp.json()["data"]["content"] == "Agreement with Acme. Monthly fee: {{monthlyFee}}."


async def test_validate_variables(client: AsyncClient):
    template = await _template(client)

    resp = await client.post(
        f"{TEMPLATES}/{template['id']}/validate-variables",
        json={"variables": {"distributorName": "Acme", "monthlyFee": "ten"}},
    )

    data = resp.json()["data"]
    assert data["valid"] is False
    assert data["errors"] == ["Variable 'monthlyFee' has invalid type. Expected: number"]


# ---------------------------------------------------------------------------
# Distributor terms
# ---------------------------------------------------------------------------

async def test_create_terms_starts_as_draft(client: AsyncClient, distributor: dict):
    resp = await client.post(_terms_url(distributor), json={"title": "Manual", "content": "Body"})

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["status"] == "DRAFT"
    assert data["distributorId"] == distributor["id"]


async def test_sign_terms(client: AsyncClient, distributor: dict):
    base = _terms_url(distributor)
    terms = (await client.post(base, json={"title": "Manual", "content": "Body", "version": "2"})).json()["data"]

    resp = await client.post(f"{base}/{terms['id']}/sign", params={"signedBy": "signer-1"})

    assert resp.status_code == 200, resp.text
    data = resp.json()["data"]
    assert data["status"] == "SIGNED"
    assert data["signedBy"] == "signer-1"
    assert data["signedDate"] is not None
    assert (data["title"], data["content"], data["version"]) == ("Manual", "Body", "2")
    assert (await client.get(f"{base}/has-active-signed")).json()["data"] is True


async def test_status_update_and_lookup(client: AsyncClient, distributor: dict):
    base = _terms_url(distributor)
    terms = (await client.post(base, json={"title": "Manual", "content": "Body"})).json()["data"]

    resp = await client.patch(f"{base}/{terms['id']}/status", params={"status": "PENDING_SIGNATURE"})

    assert resp.json()["data"]["status"] == "PENDING_SIGNATURE"
    listed = (await client.get(f"{base}/by-status/PENDING_SIGNATURE")).json()["data"]
    assert [t["id"] for t in listed] == [terms["id"]]


async def test_filter_terms_by_status(client: AsyncClient, distributor: dict):
    base = _terms_url(distributor)
    draft = (await client.post(base, json={"title": "A", "content": "a"})).json()["data"]
    signed = (await client.post(base, json={"title": "B", "content": "b"})).json()["data"]
    await client.post(f"{base}/{signed['id']}/sign")

    resp = await client.post(f"{base}/filter", json={"filters": {"status": "DRAFT"}})

    assert [t["id"] for t in resp.json()["content"]] == [draft["id"]]


async def test_latest_active_missing_is_404(client: AsyncClient, distributor: dict):
    resp = await client.get(f"{_terms_url(distributor)}/latest-active")
    assert resp.status_code == 404


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------

async def test_generate_merges_distributor_variables(client: AsyncClient, distributor: dict):
    template = await _template(client)

    resp = await client.post(
        f"{_terms_url(distributor)}/generate",
        json={"templateId": template["id"], "variables": {"monthlyFee": 250}},
    )

    assert resp.status_code == 201, resp.text
    data = resp.json()["data"]
    assert data["content"] == "Agreement with Acme Leasing. Monthly fee: 250."
    assert data["title"] == "Standard Leasing"
    assert data["templateId"] == template["id"]
    assert data["status"] == "DRAFT"
    assert data["effectiveDate"] is not None


async def test_generate_fills_distributor_country(client: AsyncClient, distributor: dict):
    template = await _template(
        client,
        name="Regional",
        templateContent="Valid in {{distributorCountry}}.",
        variables=None,
    )

    resp = await client.post(
        f"{_terms_url(distributor)}/generate", json={"templateId": template["id"]}
    )

    assert resp.status_code == 201, resp.text
    assert resp.json()["data"]["content"] == "Valid in MX."


async def test_generate_with_missing_variable_is_422(client: AsyncClient, distributor: dict):
    template = await _template(client)

    resp = await client.post(
        f"{_terms_url(distributor)}/generate", json={"templateId": template["id"], "variables": {}}
    )

    assert resp.status_code == 422
    error = resp.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert "monthlyFee" in error["message"]


async def test_auto_renew_requires_auto_renewal_template(client: AsyncClient, distributor: dict):
    template = await _template(client)
    terms = (
        await client.post(
            f"{_terms_url(distributor)}/generate",
            json={"templateId": template["id"], "variables": {"monthlyFee": 1}},
        )
    ).json()["data"]

    resp = await client.post(f"{_terms_url(distributor)}/{terms['id']}/auto-renew")

    assert resp.status_code == 409


async def test_auto_renew_generates_new_draft(client: AsyncClient, distributor: dict):
    template = await _template(
        client,
        name="Renewable",
        templateContent="{{distributorName}} until {{expirationDate}}",
        variables={"distributorName": {"type": "string", "required": True}},
        autoRenewal=True,
        renewalPeriodMonths=12,
    )
    base = _terms_url(distributor)
    original = (
        await client.post(f"{base}/generate", json={"templateId": template["id"]})
    ).json()["data"]

    resp = await client.post(f"{base}/{original['id']}/auto-renew")

    assert resp.status_code == 201, resp.text
    renewed = resp.json()["data"]
    assert renewed["id"] != original["id"]
    assert renewed["expirationDate"] is not None
    assert renewed["content"].startswith("Acme Leasing until ")
    assert "{{expirationDate}}" not in renewed["content"]


async def test_needs_renewal(client: AsyncClient, distributor: dict):
    base = _terms_url(distributor)
    soon = (
        await client.post(
            base, json={"title": "Soon", "content": "x", "expirationDate": "2000-01-01T00:00:00"}
        )
    ).json()["data"]
    open_ended = (await client.post(base, json={"title": "Open", "content": "x"})).json()["data"]

    assert (await client.get(f"{base}/{soon['id']}/needs-renewal")).json()["data"] is True
    assert (await client.get(f"{base}/{open_ended['id']}/needs-renewal")).json()["data"] is False

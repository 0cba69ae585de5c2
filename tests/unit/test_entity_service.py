"""EntityService lifecycle against a mocked repository."""

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from distributor_mgmt.core.exceptions import ConflictError, NotFoundError
from distributor_mgmt.domain.enums import Theme
from distributor_mgmt.schemas.contract import ShipmentOut
from distributor_mgmt.schemas.distributor import DistributorBrandingCreate, DistributorCreate, DistributorUpdate
from distributor_mgmt.services.contract import LendingContractService
from distributor_mgmt.services.distributor import DistributorBrandingService, DistributorService

ACTOR = "user-1"
CREATED = datetime(2025, 1, 1, 9, 0, 0)


def _row(**fields):
    base = dict(
        id="row-1",
        lock_version=1,
        created_at=CREATED,
        created_by="creator",
        updated_at=CREATED,
        updated_by="creator",
    )
    base.update(fields)
    return SimpleNamespace(**base)


@pytest.fixture
def repo():
    repository = AsyncMock()
    repository.is_versioned = True
    repository.create.side_effect = lambda **values: _row(**values)
    return repository


# ---------------------------------------------------------------------------
# create
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_create_applies_defaults_and_audit_fields(repo):
    service = DistributorService(None, repository=repo)

    out = await service.create(DistributorCreate(name="Acme"), actor=ACTOR)

    values = repo.create.await_args.kwargs
    assert values["is_active"] is True
    assert values["is_test_distributor"] is False
    assert values["created_by"] == ACTOR
    assert values["updated_by"] == ACTOR
    assert values["lock_version"] == 1
    assert out.name == "Acme"


@pytest.mark.asyncio
async def test_create_keeps_explicit_values_over_defaults(repo):
    service = DistributorService(None, repository=repo)

    await service.create(DistributorCreate(name="Acme", is_active=False))

    assert repo.create.await_args.kwargs["is_active"] is False


@pytest.mark.asyncio
async def test_create_ignores_server_fields_in_body(repo):
    service = DistributorService(None, repository=repo)

    await service.create({"name": "Acme", "id": "forged", "created_by": "forged"}, actor=ACTOR)

    values = repo.create.await_args.kwargs
    assert "id" not in values
    assert values["created_by"] == ACTOR


@pytest.mark.asyncio
async def test_create_forces_scope_and_unwraps_enums(repo):
    service = DistributorBrandingService(None, repository=repo)

    await service.create(
        DistributorBrandingCreate(distributor_id="other", theme=Theme.DARK),
        scope={"distributor_id": "dist-1"},
    )

    values = repo.create.await_args.kwargs
    assert values["distributor_id"] == "dist-1"
    assert values["theme"] == "DARK"
    assert values["is_default"] is False


# ---------------------------------------------------------------------------
# get / require
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_get_returns_none_when_absent(repo):
    repo.get_by_id.return_value = None
    assert await DistributorService(None, repository=repo).get("missing") is None


@pytest.mark.asyncio
async def test_get_outside_scope_is_absent(repo):
    repo.get_by_id.return_value = _row(distributor_id="dist-2")
    service = DistributorBrandingService(None, repository=repo)

    assert await service.get("row-1", {"distributor_id": "dist-1"}) is None
    with pytest.raises(NotFoundError):
        await service.require("row-1", {"distributor_id": "dist-1"})


# ---------------------------------------------------------------------------
# update / delete
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_update_missing_raises_without_writing(repo):
    repo.get_by_id.return_value = None
    service = DistributorService(None, repository=repo)

    with pytest.raises(NotFoundError):
        await service.update("missing", DistributorUpdate(name="Acme"), actor=ACTOR)
    repo.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_preserves_creation_audit(repo):
    existing = _row(name="Old", lock_version=3)
    repo.get_by_id.return_value = existing
    repo.update.return_value = _row(name="New", lock_version=4, updated_by=ACTOR)
    service = DistributorService(None, repository=repo)

    out = await service.update("row-1", DistributorUpdate(name="New"), actor=ACTOR)

    entity_id, values, expected = repo.update.await_args.args
    assert entity_id == "row-1"
    assert "created_at" not in values and "created_by" not in values
    assert values["updated_by"] == ACTOR
    assert values["name"] == "New"
    assert expected == 3  # current lock_version when the body carries none
    assert out.created_by == "creator"
    assert out.lock_version == 4


@pytest.mark.asyncio
async def test_update_uses_client_lock_version(repo):
    repo.get_by_id.return_value = _row(name="Old", lock_version=5)
    repo.update.return_value = _row(name="New", lock_version=3)
    service = DistributorService(None, repository=repo)

    await service.update("row-1", DistributorUpdate(name="New", lock_version=2))

    assert repo.update.await_args.args[2] == 2


@pytest.mark.asyncio
async def test_update_keeps_scope_field_when_body_omits_it(repo):
    repo.get_by_id.return_value = _row(distributor_id="dist-1")
    repo.update.return_value = _row(distributor_id="dist-1")
    service = DistributorBrandingService(None, repository=repo)

    await service.update("row-1", {"logo_url": "https://cdn/logo.png"})

    assert repo.update.await_args.args[1]["distributor_id"] == "dist-1"


@pytest.mark.asyncio
async def test_lost_update_raises_conflict(repo):
    repo.get_by_id.return_value = _row(name="Old")
    repo.update.return_value = None
    service = DistributorService(None, repository=repo)

    with pytest.raises(ConflictError):
        await service.update("row-1", DistributorUpdate(name="New"))


@pytest.mark.asyncio
async def test_transition_writes_only_given_fields(repo):
    repo.get_by_id.return_value = _row(name="Acme", is_active=True)
    repo.update.return_value = _row(name="Acme", is_active=False)
    service = DistributorService(None, repository=repo)

    await service.deactivate("row-1", actor=ACTOR)

    values = repo.update.await_args.args[1]
    assert set(values) == {"is_active", "updated_at", "updated_by"}
    assert values["is_active"] is False


@pytest.mark.asyncio
async def test_delete_missing_raises(repo):
    repo.get_by_id.return_value = None
    service = DistributorService(None, repository=repo)

    with pytest.raises(NotFoundError):
        await service.delete("missing")
    repo.delete.assert_not_awaited()


@pytest.mark.asyncio
async def test_delete_existing(repo):
    repo.get_by_id.return_value = _row(name="Acme")
    await DistributorService(None, repository=repo).delete("row-1")
    repo.delete.assert_awaited_once_with("row-1")


# ---------------------------------------------------------------------------
# contract approval
# ---------------------------------------------------------------------------

@pytest.mark.asyncio
async def test_lending_approval_links_shipment_to_lending_contract(repo):
    repo.get_by_id.return_value = _row(distributor_id="dist-1", product_id="prod-1", status="PENDING")
    repo.update.side_effect = lambda entity_id, values, version: _row(
        distributor_id="dist-1", product_id="prod-1", **values
    )
    shipments = AsyncMock()
    shipments.create.return_value = ShipmentOut.model_validate(
        _row(id="ship-1", lending_contract_id="row-1", product_id="prod-1", status="PENDING")
    )
    service = LendingContractService(None, repository=repo, shipments=shipments)

    result = await service.approve("row-1", approved_by=ACTOR)

    values = repo.update.await_args.args[1]
    assert values["status"] == "APPROVED"
    assert values["approved_by"] == ACTOR
    shipments.create.assert_awaited_once_with(
        {"lending_contract_id": "row-1", "product_id": "prod-1"}, actor=ACTOR
    )
    assert result.contract.status == "APPROVED"
    assert result.shipment.id == "ship-1"


@pytest.mark.asyncio
async def test_approving_missing_contract_opens_no_shipment(repo):
    repo.get_by_id.return_value = None
    shipments = AsyncMock()

    with pytest.raises(NotFoundError):
        await LendingContractService(None, repository=repo, shipments=shipments).approve("missing")
    shipments.create.assert_not_awaited()

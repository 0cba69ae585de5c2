"""
Test Configuration and Fixtures

Provides an in-memory database, an async test client, and small helpers for
creating parent rows through the API.
"""

import os

# Must be set before the application modules read their settings
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["AUDIT_PERSIST_ENABLED"] = "false"
os.environ["APP_ENV"] = "test"

from collections.abc import AsyncGenerator  # noqa: E402

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

import distributor_mgmt.domain  # noqa: E402,F401
from distributor_mgmt.db.base import Base, get_db  # noqa: E402
from distributor_mgmt.main import app  # noqa: E402

API = "/api/v1"
ACTOR = "11111111-1111-1111-1111-111111111111"


@pytest_asyncio.fixture(scope="function")
async def session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    """Fresh in-memory schema per test; one shared connection so every session sees it."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for seeding or inspecting rows directly."""
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture(scope="function")
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Async test client; each request gets its own committed-or-rolled-back session."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url="http://test", headers={"X-User-Id": ACTOR}
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def distributor(client: AsyncClient) -> dict:
    """Create a distributor through the API."""
    resp = await client.post(f"{API}/distributors", json={"name": "Acme Leasing", "countryId": "MX"})
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest_asyncio.fixture
async def agency(client: AsyncClient, distributor: dict) -> dict:
    resp = await client.post(
        f"{API}/distributors/{distributor['id']}/agencies", json={"name": "Downtown", "code": "DT-01"}
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]


@pytest_asyncio.fixture
async def product(client: AsyncClient, distributor: dict) -> dict:
    resp = await client.post(
        f"{API}/distributors/{distributor['id']}/products",
        json={"name": "Scooter X1", "sku": "SX1", "specifications": {"engine": "125cc", "colors": ["red"]}},
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["data"]

"""Root conftest — shared configuration plus a wired app over a fresh database.

Invariants:
    - Every test gets a fresh SQLite database under tmp_path
    - The app is wired through main.wire_dependencies, exactly like the lifespan
    - The UI's API client reaches the same app in-process

Design Decisions:
    - File-backed SQLite over :memory: the list endpoint runs two sessions
      concurrently, and an in-memory database is private to one connection
    - raise_app_exceptions=False: unhandled errors must surface as the
      catch-all 500 response, not as exceptions inside the test
"""

import os

# Ensure tests never reach a real database or a remote API
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")
os.environ.setdefault("DEPLOYMENT_REGION", "test-region")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from customer_health.config import Settings  # noqa: E402
from customer_health.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager,
)
from customer_health.main import create_app, wire_dependencies  # noqa: E402


@pytest.fixture
def test_settings(tmp_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        deployment_region="test-region",
        api_base_url=None,
    )


@pytest.fixture
async def db_manager(test_settings):
    manager = DatabaseSessionManager.from_url(test_settings.database_url)
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
async def app(db_manager, test_settings):
    application = create_app(test_settings)
    wire_dependencies(application, db_manager, test_settings)
    yield application
    await application.state.http_client.aclose()


@pytest.fixture
async def client(app):
    """HTTP client against the wired app (lifespan not run)."""
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def make_checklist(client):
    """Create a checklist through the API and return its JSON data."""

    async def _make(customer_id="cust-1", score=75, notes=None):
        body = {"customerId": customer_id, "score": score}
        if notes is not None:
            body["notes"] = notes
        res = await client.post("/api/checklists", json=body)
        assert res.status_code == 201, res.text
        return res.json()["data"]

    return _make

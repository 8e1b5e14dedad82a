"""Root conftest — shared fixtures: fresh seeded store + FastAPI test client.

Invariants:
    - Every test gets its own seeded AlbumStore (no state leaks between tests)
    - get_album_store dependency overridden to return that store

Design Decisions:
    - ASGITransport does not run the lifespan, so the store is injected via
      dependency_overrides instead of app.state
"""

import pytest
from httpx import ASGITransport, AsyncClient

from albums_api.api.dependencies import get_album_store
from albums_api.core.album_store import AlbumStore
from albums_api.main import app


@pytest.fixture
def store():
    return AlbumStore.seeded()


@pytest.fixture
async def client(store):
    """FastAPI test client bound to the per-test store."""
    app.dependency_overrides[get_album_store] = lambda: store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()

"""API test fixtures — FastAPI app with the dispatcher dependency overridden.

Invariants:
    - Every test gets a fresh in-memory repository behind the HTTP routes
    - get_dispatch / get_repository overridden, so no AWS wiring and no
      process-wide logging changes happen in tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from postboard.dependencies import get_dispatch, get_repository
from postboard.main import app


@pytest.fixture
async def client(dispatch, repository):
    """FastAPI test client with dispatcher/repository overridden."""
    app.dependency_overrides[get_dispatch] = lambda: dispatch
    app.dependency_overrides[get_repository] = lambda: repository

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()

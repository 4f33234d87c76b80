"""Root conftest — shared fixtures: a fresh UserStore and an HTTP client around it.

Invariants:
    - Every test gets its own store, discarded afterwards
    - Route tests talk to the ASGI app in-process (no network)

Design Decisions:
    - httpx AsyncClient + ASGITransport over TestClient: async tests end to end
    - Settings built explicitly: tests never read a developer's .env
"""

import pytest
from httpx import ASGITransport, AsyncClient

from user_service.config import Settings
from user_service.core.user_store import UserStore
from user_service.main import create_app


@pytest.fixture
def store():
    return UserStore()


@pytest.fixture
def test_app(store):
    return create_app(store, Settings(_env_file=None))


@pytest.fixture
async def client(test_app):
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def user_payload():
    """Factory for valid creation bodies; override any field by keyword."""
    def _make(**overrides) -> dict:
        body = {
            "username": "alice",
            "email": "alice@x.com",
            "first_name": "Alice",
            "last_name": "Smith",
            "age": 30,
        }
        body.update(overrides)
        return body
    return _make

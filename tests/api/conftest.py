"""Route test fixtures - fresh store + settings per test, httpx client over ASGI.

Invariants:
    - Every test gets its own empty UserStore via dependency_overrides
    - Settings overridden per test (no .env or environment leakage)

Design Decisions:
    - ASGITransport skips lifespan: the store comes from the override, logging stays default
"""

import pytest
from httpx import ASGITransport, AsyncClient

from roster.config import Settings, get_settings
from roster.infrastructure.user_store import UserStore, get_user_store
from roster.main import app


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, check_email_unique_on_update=False)


@pytest.fixture
async def client(store, settings):
    """FastAPI test client with store and settings overridden."""
    app.dependency_overrides[get_user_store] = lambda: store
    app.dependency_overrides[get_settings] = lambda: settings

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()

import contextlib

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from src.config.settings import Settings
from src.main import create_app
from src.rsvps.tests.inmemory_models import InMemoryRSVPStorage, create_test_settings


@pytest.fixture
def settings() -> Settings:
    return create_test_settings()


@pytest.fixture
def storage() -> InMemoryRSVPStorage:
    """A fresh in-memory storage for each test."""
    return InMemoryRSVPStorage()


@pytest.fixture
def client_factory(settings, storage):
    """
    Build the app on in-memory storage and return a client factory.
    Dependency overrides are applied for the lifetime of the client.
    """

    @contextlib.asynccontextmanager
    async def factory(overrides: dict | None = None, app_settings: Settings | None = None):
        app = create_app(app_settings or settings, storage=storage)
        app.dependency_overrides.update(overrides or {})
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
        app.dependency_overrides.clear()

    return factory


@pytest_asyncio.fixture
async def client(client_factory):
    async with client_factory() as ac:
        yield ac

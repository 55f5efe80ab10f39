from functools import partial

import httpx
import pytest

from src.main import create_app
from src.rsvps.tests.inmemory_models import InMemoryRSVPStorage, create_test_settings


def refuse_connection(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture
def app_storage() -> InMemoryRSVPStorage:
    return InMemoryRSVPStorage()


@pytest.fixture
def app_client_class(app_storage):
    """An httpx client class whose requests go straight to the app."""
    app = create_app(create_test_settings(), storage=app_storage)
    return partial(httpx.AsyncClient, transport=httpx.ASGITransport(app=app))


@pytest.fixture
def offline_client_class():
    return partial(httpx.AsyncClient, transport=httpx.MockTransport(refuse_connection))

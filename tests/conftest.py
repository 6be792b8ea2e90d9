# tests/conftest.py
import os
import sys

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from httpx import ASGITransport, AsyncClient

from backoffice import config
from server import create_app
from tests.utils.fake_store import FakeStore
from tests.utils.utils import TEST_PASSWORD, bearer


@pytest.fixture(autouse=True)
def _backoffice_password(monkeypatch):
    monkeypatch.setattr(config, "BACKOFFICE_PASSWORD", TEST_PASSWORD)


@pytest.fixture
def auth_headers():
    return bearer()


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    """Test client with the lifespan run, so the store is connected."""
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def async_client(app, store):
    await store.connect()
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
    await store.close()

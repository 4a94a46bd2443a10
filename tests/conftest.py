import pytest
from fastapi.testclient import TestClient

from shortener.dependencies.store import get_store
from shortener.main import app
from shortener.storage.memory import InMemoryLinkStore


@pytest.fixture
def store():
    """Each test gets an empty store."""
    return InMemoryLinkStore(code_length=6, max_attempts=10, max_custom_code_length=64)


@pytest.fixture
def client(store):
    """Test client with the link store dependency overridden."""

    def override_get_store():
        return store

    app.dependency_overrides[get_store] = override_get_store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

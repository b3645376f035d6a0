# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# Fixtures shared by the test suite:
# - a freshly seeded UserStore and application per test
# - a FastAPI TestClient bound to that application
# - a UserDirectoryAPI client whose requests are served by the same app
# =============================================================================

import os

# Keep test output quiet and the CORS policy predictable, whatever the
# developer's shell exports.  Settings are read at import time.
os.environ.setdefault("LOG_LEVEL", "WARNING")
os.environ["CORS_ORIGINS"] = "*"

import pytest
from fastapi.testclient import TestClient

from user_directory.app.core.store import UserStore
from user_directory.app.main import create_app
from user_directory_api import UserDirectoryAPI

from tests.helpers import BASE_URL, BridgeSession


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def store():
    """A store holding only the three seed users."""
    return UserStore()


@pytest.fixture
def app(store):
    return create_app(store=store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def bridge(client):
    return BridgeSession(client)


@pytest.fixture
def api(bridge):
    """API client talking to the in‑process application."""
    return UserDirectoryAPI(base_url=BASE_URL, session=bridge)

"""
Users API Backend - Test Configuration (conftest.py)
=====================================================

Shared pytest fixtures for the entire test suite.

Fixtures (all function-scoped, created fresh for each test):
    ├── store:        UserStore seeded with the two sample users
    ├── empty_store:  UserStore with no users
    ├── user_service: UserService over `store`
    ├── app:          FastAPI app built by create_app() around `store`
    └── test_client:  HTTPX AsyncClient routed straight into `app`
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["CORS_ORIGINS"] = "*"
os.environ.pop("PORT", None)

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from userapi.main import create_app  # noqa: E402
from userapi.services.user_service import UserService  # noqa: E402
from userapi.store import UserStore  # noqa: E402


@pytest.fixture
def store():
    """A store holding John Doe (id 1) and Jane Smith (id 2); next id is 3."""
    return UserStore.with_sample_users()


@pytest.fixture
def empty_store():
    return UserStore()


@pytest.fixture
def user_service(store):
    return UserService(store)


@pytest.fixture
def app(store):
    """A fresh application per test, so no test sees another's users."""
    return create_app(store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient configured to talk to the FastAPI app in-process.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/api/v1/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

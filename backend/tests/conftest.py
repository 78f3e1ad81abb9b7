"""
CookHub Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that touches the database gets its own SQLite file under
       pytest's tmp_path, so tests never share rows.

Fixture Hierarchy:
    Function-scoped:
    ├── empty_store:  connected Store with all tables, no rows
    ├── store:        same, plus the seed dataset (3 chefs, 4 recipes,
    │                 3 master classes, 2 users)
    ├── app:          create_app() with `store` attached to app.state
    └── test_client:  HTTPX AsyncClient talking to `app` over ASGITransport
"""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_ON_STARTUP"] = "false"
os.environ["DATABASE_PATH"] = "./cookhub_test.db"

from cookhub.bootstrap import create_tables  # noqa: E402
from cookhub.database import Store  # noqa: E402
from cookhub.seed import seed_database  # noqa: E402


@pytest.fixture
def db_path(tmp_path) -> str:
    return str(tmp_path / "cooking_platform.db")


@pytest_asyncio.fixture
async def empty_store(db_path) -> AsyncGenerator[Store, None]:
    store = Store(db_path)
    await store.connect()
    await create_tables(store)
    yield store
    await store.dispose()


@pytest_asyncio.fixture
async def store(empty_store) -> Store:
    await seed_database(empty_store)
    return empty_store


@pytest.fixture
def app(store):
    """
    FastAPI app wired to the seeded test store.

    ASGITransport does not run the lifespan, so the Store is attached by hand.
    """
    from cookhub.main import create_app

    application = create_app()
    application.state.store = store
    return application


@pytest_asyncio.fixture
async def test_client(app) -> AsyncGenerator[AsyncClient, None]:
    """
    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def future_class():
    """Factory for master class bodies scheduled after any plausible test run."""

    def build(title: str, chef_id: int, when: str, max_students: int = 10) -> dict:
        return {
            "title": title,
            "chef_id": chef_id,
            "datetime": when,
            "duration": 60,
            "price": 1000,
            "max_students": max_students,
            "description": "",
        }

    return build

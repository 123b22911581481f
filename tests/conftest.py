"""
Catalog API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.
Who:   Used by all test files in the tests/ directory.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── mock_repository: AsyncMock standing in for ProductRepository
    ├── service:         ProductService wired to mock_repository
    ├── sample_product:  Product ORM instance (not persisted)
    ├── database:        Empty products table in a throwaway SQLite file
    ├── test_client:     HTTPX AsyncClient for endpoint testing
    └── admin_headers / user_headers: Authorization headers per role
"""

import os
import tempfile
from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before any catalog import: settings and the engine are built at import time
_test_dir = tempfile.mkdtemp(prefix="catalog_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/test.db"
os.environ["ENVIRONMENT"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_TOKEN"] = "test-admin-token"
os.environ["USER_TOKEN"] = "test-user-token"

from catalog.database import create_tables, drop_tables  # noqa: E402
from catalog.models.product import Product  # noqa: E402
from catalog.services.product_service import ProductService  # noqa: E402


ADMIN_TOKEN = os.environ["ADMIN_TOKEN"]
USER_TOKEN = os.environ["USER_TOKEN"]


# ══════════════════════════════════════════════════════════════════════════
# Unit Fixtures (no database)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def mock_repository():
    """
    Provides a mock ProductRepository.

    Every storage coroutine is an AsyncMock, so tests can both stub
    return values and assert that no storage call happened.

    Usage:
        async def test_get(mock_repository, service):
            mock_repository.find_by_id.return_value = product
            assert await service.get_by_id(product.id) is product
    """
    repository = MagicMock()
    repository.find = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.find_by_name = AsyncMock(return_value=[])
    repository.insert = AsyncMock()
    repository.update_by_id = AsyncMock(return_value=None)
    repository.delete_by_id = AsyncMock(return_value=None)
    repository.delete_all = AsyncMock(return_value=0)
    return repository


@pytest.fixture
def service(mock_repository):
    return ProductService(repository=mock_repository)


@pytest.fixture
def sample_product():
    """A Product instance with every column populated (never added to a session)."""
    return Product(
        id=uuid4(),
        name="Keyboard",
        description="Mechanical, 87 keys",
        price=50.0,
        stock=10,
        created_at=datetime.now(timezone.utc),
    )


# ══════════════════════════════════════════════════════════════════════════
# Integration Fixtures (SQLite via aiosqlite)
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def database():
    """
    Provides an empty products table.

    The engine runs on NullPool for SQLite, so each test's event loop opens
    its own connections against the same file.
    """
    await drop_tables()
    await create_tables()
    yield
    await drop_tables()


@pytest_asyncio.fixture
async def test_client(database):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from catalog.main import app
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {USER_TOKEN}"}

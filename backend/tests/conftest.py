"""
Phonebook Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy:
    Function-scoped (created fresh for each test):
    ├── seed_contacts:  the single-contact phonebook most tests start from
    ├── memory_store:   MemoryContactStore seeded with seed_contacts
    ├── sql_store:      SqlContactStore over a temporary SQLite database
    ├── mock_db_session: AsyncSession double for error-translation tests
    └── test_client:    HTTPX AsyncClient bound to the app, store overridden
"""

import os
import tempfile
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport


# ══════════════════════════════════════════════════════════════════════════
# Environment Setup
# ══════════════════════════════════════════════════════════════════════════

# Must run before anything imports phonebook.config
_TEST_DIR = tempfile.mkdtemp(prefix="phonebook_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DIR}/phonebook.db"
os.environ["STORE_BACKEND"] = "memory"
os.environ["STATIC_DIR"] = os.path.join(_TEST_DIR, "no-static-dir")
os.environ["LOG_LEVEL"] = "WARNING"

from phonebook.database import create_schema  # noqa: E402
from phonebook.stores import get_contact_store  # noqa: E402
from phonebook.stores.memory_store import MemoryContactStore  # noqa: E402
from phonebook.stores.sql_store import SqlContactStore  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def seed_contacts():
    return [{"id": 1, "name": "Arto Hellas", "number": "040-123456"}]


@pytest.fixture
def memory_store(seed_contacts):
    return MemoryContactStore(seed=seed_contacts)


@pytest_asyncio.fixture
async def sql_store(tmp_path):
    """
    SqlContactStore over a real, empty SQLite file.

    The schema is created with the same create_schema() the app runs at startup.
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'store.db'}")
    await create_schema(bind=engine)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield SqlContactStore(session)
    await engine.dispose()


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.side_effect = OperationalError(...)
        store = SqlContactStore(mock_db_session)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


def _client_for(app, store):
    app.dependency_overrides[get_contact_store] = lambda: store
    transport = ASGITransport(app=app)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest_asyncio.fixture
async def test_client(memory_store):
    """
    Async HTTP client talking to phonebook.main:app with `memory_store`
    injected in place of the configured store.
    """
    from phonebook.main import app

    async with _client_for(app, memory_store) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def client_for():
    """Build a client for an arbitrary app/store pair (e.g. a fresh create_app())."""
    return _client_for

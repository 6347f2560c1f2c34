"""
Roster API - Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test that touches a store gets its own SQLite file under
       tmp_path, reached through the real ConnectionPool and QueryExecutor.
       The API client overrides get_connection_pool, so no lifespan and no
       MariaDB server are needed.

Fixture Hierarchy (all function-scoped):
    test_settings ─▶ pool ─▶ executor
                       └──▶ test_client ─▶ (httpx AsyncClient over ASGI)
    failing_executor ─▶ failing_client   (every statement fails)
"""

import os

# Must be set before app.config is imported anywhere
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import List  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy import text  # noqa: E402

from app.config import Settings  # noqa: E402
from app.database import Base, create_pool, get_connection_pool  # noqa: E402
from app.errors import DataAccessError  # noqa: E402
from app.main import create_app  # noqa: E402
from app.models import catalog, student  # noqa: E402,F401
from app.services.query_executor import QueryExecutor, get_query_executor  # noqa: E402


class FailingExecutor:
    """Stands in for a store that rejects every statement."""

    def __init__(self, message: str = "Can't connect to MySQL server on 'localhost'"):
        self.message = message
        self.statements: List = []

    async def execute(self, statement):
        self.statements.append(statement)
        return DataAccessError(message=self.message)

    async def ping(self) -> bool:
        return False


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "database_url": f"sqlite+aiosqlite:///{tmp_path / 'roster.db'}",
        "db_connection_limit": 5,
        "db_acquire_timeout_ms": 5_000,
        "log_level": "WARNING",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return make_settings(tmp_path)


@pytest.fixture
def settings_factory(tmp_path):
    """Settings over the same SQLite file with some values overridden."""
    def factory(**overrides) -> Settings:
        return make_settings(tmp_path, **overrides)
    return factory


@pytest_asyncio.fixture
async def pool(test_settings):
    """A real pool over a fresh SQLite file with the schema created."""
    pool = create_pool(test_settings)
    async with pool.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        # orders has no model; its schema is owned elsewhere
        await conn.execute(text(
            "CREATE TABLE orders (ORDER_ID VARCHAR(20) PRIMARY KEY, "
            "ITEM_ID VARCHAR(20) NOT NULL, QUANTITY INTEGER NOT NULL)"
        ))
    yield pool
    await pool.dispose()


@pytest.fixture
def executor(pool) -> QueryExecutor:
    return QueryExecutor(pool)


@pytest_asyncio.fixture
async def test_client(pool, test_settings):
    """
    HTTPX AsyncClient talking to a fresh app wired to the test pool.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/api/students")
    """
    app = create_app(test_settings)
    app.dependency_overrides[get_connection_pool] = lambda: pool
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def failing_executor() -> FailingExecutor:
    return FailingExecutor()


@pytest_asyncio.fixture
async def failing_client(failing_executor, test_settings):
    app = create_app(test_settings)
    app.dependency_overrides[get_query_executor] = lambda: failing_executor
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def student_payload():
    return {"NAME": "Asha", "TITLE": "Mr", "CLASS": "10A", "SECTION": "B", "ROLLID": "12"}

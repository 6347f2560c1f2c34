"""
Roster API - Connection Pool Adapter
=====================================

What:  Async SQLAlchemy engine wrapped as a bounded connection pool, plus the
       declarative Base shared by the ORM models and Alembic.
Why:   Every route needs exactly one pooled connection per statement, and the
       connection must go back to the pool on every exit path.
How:   ConnectionPool.acquire() is an async context manager around
       AsyncEngine.connect(); leaving the block closes (releases) the
       connection whether the body returned or raised.
Who:   Built by create_pool() in the app lifespan and injected into
       QueryExecutor through get_connection_pool().
When:  One pool per application instance; one acquire() per statement.

Pool sizing:
    pool_size=connection_limit, max_overflow=0:
        The pool never holds more than connection_limit connections.
    pool_timeout=acquire timeout:
        Waiting longer than this for a free slot raises PoolTimeout.
    connect timeout:
        Passed to the driver through connect_args; bounds the TCP/handshake
        of a brand new physical connection only.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, Optional

from fastapi import Request
from sqlalchemy import exc as sa_exc
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    Models register their tables on Base.metadata, which Alembic and the
    test fixtures use to create the schema.
    """
    pass


class PoolTimeout(Exception):
    """Raised when no pooled connection became free within the acquire timeout."""

    def __init__(self, timeout_ms: int):
        self.timeout_ms = timeout_ms
        super().__init__(
            f"Timed out after {timeout_ms}ms waiting for a database connection"
        )


def _connect_args(url: URL, connect_timeout: float) -> Dict[str, Any]:
    """
    Driver-specific keyword for the physical connect timeout.

    aiomysql takes `connect_timeout`.
    SQLite has no network handshake, so nothing is passed.
    """
    backend = url.get_backend_name()
    if backend in ("mysql", "mariadb"):
        return {"connect_timeout": connect_timeout}
    return {}


class ConnectionPool:
    """
    Bounded pool of database connections.

    Attributes:
        engine:             The underlying AsyncEngine (owns the real pool)
        connection_limit:   Maximum number of concurrent connections
        acquire_timeout_ms: Maximum wait for a free slot
        connect_timeout_ms: Maximum time to open a new physical connection
    """

    def __init__(
        self,
        engine: AsyncEngine,
        connection_limit: int,
        acquire_timeout_ms: int,
        connect_timeout_ms: int,
    ):
        self.engine = engine
        self.connection_limit = connection_limit
        self.acquire_timeout_ms = acquire_timeout_ms
        self.connect_timeout_ms = connect_timeout_ms

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[AsyncConnection]:
        """
        Borrow one connection for the duration of the `async with` block.

        Raises:
            PoolTimeout: No slot was freed within acquire_timeout_ms.
            sqlalchemy.exc.SQLAlchemyError: Opening the connection failed.
        """
        try:
            conn = await self.engine.connect()
        except sa_exc.TimeoutError as exc:
            raise PoolTimeout(self.acquire_timeout_ms) from exc
        try:
            yield conn
        finally:
            # Returns the connection to the pool (exactly once per acquire)
            await conn.close()

    def checked_out(self) -> int:
        """Number of connections currently lent out."""
        return self.engine.pool.checkedout()

    async def dispose(self) -> None:
        """Close every pooled connection (application shutdown)."""
        await self.engine.dispose()
        logger.info("Connection pool disposed")


def create_pool(config: Optional[Settings] = None) -> ConnectionPool:
    """
    Build a ConnectionPool from settings.

    What:  Creates the AsyncEngine with the pool limits and timeouts applied.
    When:  Called from the application lifespan (and from tests with their
           own Settings instance).
    Note:  No connection is opened here; the first acquire() connects.
    """
    config = config or default_settings
    url = config.database_url_resolved
    engine = create_async_engine(
        url,
        pool_size=config.db_connection_limit,
        max_overflow=0,
        pool_timeout=config.acquire_timeout_seconds,
        pool_pre_ping=True,
        pool_recycle=3600,
        connect_args=_connect_args(url, config.connect_timeout_seconds),
        echo=config.log_level == "DEBUG",
    )
    logger.info(
        "Connection pool created for %s (limit=%d, acquire_timeout=%dms, connect_timeout=%dms)",
        url.render_as_string(hide_password=True),
        config.db_connection_limit,
        config.db_acquire_timeout_ms,
        config.db_connect_timeout_ms,
    )
    return ConnectionPool(
        engine=engine,
        connection_limit=config.db_connection_limit,
        acquire_timeout_ms=config.db_acquire_timeout_ms,
        connect_timeout_ms=config.db_connect_timeout_ms,
    )


# ── Dependency ────────────────────────────────────────────────────────────
def get_connection_pool(request: Request) -> ConnectionPool:
    """FastAPI dependency: the pool created by the lifespan for this app."""
    return request.app.state.pool

"""
Roster API - Query Executor
============================

What:  Runs one parameterized statement on a pooled connection and returns
       its outcome as a value.
Why:   Every route does acquire → execute → release; doing it in one place
       guarantees the release and the error translation are never skipped.
How:   ConnectionPool.acquire() scopes the connection; SQLAlchemy statements
       carry their values as bound parameters; failures come back as
       DataAccessError instead of propagating.
Who:   Injected into services through get_query_executor().

Execution contract:
    execute(statement) → QueryResult | DataAccessError
        - one statement, committed on its own (no multi-statement transaction)
        - no retries: the first failure is the answer
        - connection released on success, query error and pool timeout alike
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from fastapi import Depends
from sqlalchemy import exc as sa_exc
from sqlalchemy import text
from sqlalchemy.sql import Executable

from app.database import ConnectionPool, PoolTimeout, get_connection_pool
from app.errors import DataAccessError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class QueryResult:
    """
    What the driver reported for one statement.

    rows:           Row set for reads (column name → value), empty for writes
    affected_rows:  Rows matched by a write; row count for reads
    """

    rows: List[Dict[str, Any]] = field(default_factory=list)
    affected_rows: int = 0


ExecutionOutcome = Union[QueryResult, DataAccessError]


def _describe(exc: sa_exc.SQLAlchemyError) -> str:
    # The driver's own message, without SQLAlchemy's statement/background suffix
    if isinstance(exc, sa_exc.DBAPIError) and exc.orig is not None:
        return str(exc.orig)
    return str(exc)


class QueryExecutor:
    """Executes statements through a ConnectionPool."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    async def execute(self, statement: Executable) -> ExecutionOutcome:
        """
        Execute one statement and report rows / affected-row count.

        Args:
            statement: A SQLAlchemy Core statement. Values must be bound
                       parameters (select/insert/update/delete constructs or
                       text() with bindparams), never formatted into SQL.

        Returns:
            QueryResult on success, DataAccessError on any store or pool failure.
        """
        try:
            async with self.pool.acquire() as conn:
                result = await conn.execute(statement)
                if result.returns_rows:
                    rows = [dict(row) for row in result.mappings().all()]
                    outcome = QueryResult(rows=rows, affected_rows=len(rows))
                else:
                    outcome = QueryResult(affected_rows=result.rowcount)
                await conn.commit()
        except PoolTimeout as exc:
            logger.error("Connection pool exhausted: %s", exc)
            return DataAccessError(message=str(exc))
        except sa_exc.SQLAlchemyError as exc:
            logger.error(
                "Statement failed: %s | %s",
                _describe(exc),
                type(exc).__name__,
            )
            return DataAccessError(message=_describe(exc))

        logger.debug("Statement ok: %d row(s)", outcome.affected_rows)
        return outcome

    async def ping(self) -> bool:
        """Lightweight connectivity probe (SELECT 1) for the health check."""
        outcome = await self.execute(text("SELECT 1"))
        return isinstance(outcome, QueryResult)


# ── Dependency ────────────────────────────────────────────────────────────
def get_query_executor(pool: ConnectionPool = Depends(get_connection_pool)) -> QueryExecutor:
    """FastAPI dependency: an executor bound to the application's pool."""
    return QueryExecutor(pool)

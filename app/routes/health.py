"""
Roster API - Health Check Route
================================

What:  Health check endpoint for monitoring and load balancer probes.
Why:   The service is only useful while its database is reachable; load
       balancers use this to route away from instances that cannot query.
How:   Runs SELECT 1 through the same executor/pool the routes use.

Status levels:
    healthy:   Database reachable (HTTP 200)
    unhealthy: Database unreachable or pool exhausted (HTTP 503)
"""

import logging
import time

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app import __version__
from app.schemas.student import HealthResponse
from app.services.query_executor import QueryExecutor, get_query_executor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(
    executor: QueryExecutor = Depends(get_query_executor),
) -> JSONResponse:
    connected = await executor.ping()
    if not connected:
        logger.warning("Health check: database unreachable")

    body = HealthResponse(
        status="healthy" if connected else "unhealthy",
        version=__version__,
        database="connected" if connected else "disconnected",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
    return JSONResponse(status_code=200 if connected else 503, content=body.model_dump())

"""
Roster API - FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application instance.
Why:   Middleware, exception handlers, routers and the connection pool's
       lifecycle are wired in one place.
How:   create_app() returns a configured FastAPI instance; lifespan() builds
       the connection pool on startup and disposes it on shutdown.
Who:   uvicorn (uvicorn app.main:app) and the test suite.

Application Architecture:
    Middleware:   Request ID → Logging → GZip → CORS
    Routes:       /api/students (CRUD), /api/foods, /api/orders, /health
    Handlers:     RequestValidationError → 400, Exception → 500
                  (expected failures are outcome values mapped by app.responses)

Lifecycle:
    Startup:   configure logging, create the connection pool on app.state
    Shutdown:  dispose the pool (close every pooled connection)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import Settings, settings as default_settings
from app.database import create_pool
from app.errors import FieldError
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import catalog, health, students

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str) -> None:
    """
    Configure the root logger once, before anything else logs.

    Format: 2024-01-15T12:00:00 [INFO] app.services.query_executor: message
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # Per-request noise; RequestLoggingMiddleware covers access logging
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Create the connection pool on startup, dispose it on shutdown.

    The pool lives on app.state and reaches handlers only through the
    get_connection_pool / get_query_executor dependencies.
    """
    config: Settings = app.state.settings
    setup_logging(config.log_level)
    logger.info("Roster API %s starting up...", __version__)

    app.state.pool = create_pool(config)
    logger.info("Server ready at http://%s:%d", config.backend_host, config.backend_port)

    yield

    logger.info("Roster API shutting down...")
    await app.state.pool.dispose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_validation_errors(exc: RequestValidationError) -> list:
    """Flatten FastAPI's parse errors (bad JSON, non-object body) into FieldErrors."""
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        location = "params" if loc and loc[0] == "path" else "body"
        field = loc[-1] if len(loc) > 1 else "body"
        errors.append(FieldError(field, err.get("msg", "Invalid value"), location).to_dict())
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    """
    Handlers for failures that never became outcome values.

    RequestValidationError → 400  body could not be read as a JSON object
    Exception              → 500  programming errors; stack trace logged only
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request: %s", rid, exc.errors())
        return JSONResponse(
            status_code=400,
            content={"errors": _request_validation_errors(exc), "request_id": rid},
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # Runs outside RequestIDMiddleware; the ID is read from request.state
        rid = getattr(request.state, "request_id", "")
        logger.error("[%s] Unexpected error: %s", rid, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error", "request_id": rid},
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use; defaults to the environment-loaded settings.
                Tests pass their own instance.
    """
    config = config or default_settings

    app = FastAPI(
        title="Roster API",
        description="API for managing students and read-only food item and order listings.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = config

    # Executed in reverse order of addition: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(students.router)
    app.include_router(catalog.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()

"""
Roster API - Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
Why:   Connection details, pool limits and timeouts are supplied by the
       environment instead of being hard-coded in the service.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a module-level `settings` object.
Who:   Imported by the app factory, the pool factory and Alembic.
When:  Loaded once at module import time.

Database URL resolution:
    DATABASE_URL, when set, is used verbatim (tests point it at SQLite).
    Otherwise the URL is assembled from DB_DRIVER, DB_HOST, DB_PORT,
    DB_USER, DB_PASSWORD and DB_NAME with sqlalchemy's URL.create, which
    escapes special characters in the password.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Defaults match a local MariaDB development database.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Async driver for MariaDB/MySQL; any SQLAlchemy async dialect works
    db_driver: str = Field(default="mysql+aiomysql")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_user: str = Field(default="root")
    db_password: str = Field(default="root")
    db_name: str = Field(default="sample")

    database_url: Optional[str] = Field(
        default=None,
        description="Full SQLAlchemy URL; overrides the DB_* parts when set",
    )

    # ── Connection Pool ───────────────────────────────────────────────────
    # What: Hard cap on concurrent connections (no overflow connections)
    db_connection_limit: int = Field(default=10, ge=1, le=100)

    # What: Time waiting for a free pool slot before the operation fails
    db_acquire_timeout_ms: int = Field(default=30_000, ge=1, le=600_000)

    # What: Time allowed to establish a new physical connection
    # Distinct from the acquire timeout: this one is enforced by the driver
    db_connect_timeout_ms: int = Field(default=10_000, ge=1, le=600_000)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }

    @property
    def database_url_resolved(self) -> URL:
        """
        What:  The SQLAlchemy URL the connection pool connects to.
        How:   DATABASE_URL wins; otherwise the URL is built from its parts.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            drivername=self.db_driver,
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    @property
    def acquire_timeout_seconds(self) -> float:
        return self.db_acquire_timeout_ms / 1000

    @property
    def connect_timeout_seconds(self) -> float:
        return self.db_connect_timeout_ms / 1000


settings = Settings()

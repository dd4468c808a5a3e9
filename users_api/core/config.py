"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

SQLITE_DRIVER_PREFIX = "sqlite+aiosqlite:///"


def normalize_database_url(url: str) -> str:
    """Return a SQLAlchemy asyncio URL for the given connection string.

    Bare SQLite forms are rewritten to use the aiosqlite driver. The text
    after ``sqlite://`` (or after ``sqlite:``) is taken as the file path
    as written, so ``sqlite://users.db`` and ``sqlite:users.db`` are
    relative, ``sqlite:///var/data/users.db`` is absolute and
    ``sqlite::memory:`` is an in-memory database. Any other URL is
    returned unchanged and must already name an async driver.
    """
    url = url.strip()
    if url.startswith("sqlite+"):
        return url
    for scheme in ("sqlite://", "sqlite:"):
        if url.startswith(scheme):
            return SQLITE_DRIVER_PREFIX + url[len(scheme):]
    return url


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        database_url: Connection string for the user store. Required.
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs and /redoc).
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        host: Address the HTTP listener binds to.
        port: Port the HTTP listener binds to.
        greeting: Plain-text body served on ``GET /``.
        database_pool_size: Connections kept by the pool for file databases.
        database_echo: Log every SQL statement (development only).
        run_migrations: Apply pending schema migrations on startup.
        rate_limit_enabled: Toggle per-client rate limiting (off by default).
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    database_url: str
    project_name: str = "Users API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000
    greeting: str = "Hello, FastAPI with SQLite!"

    database_pool_size: int = 5
    database_echo: bool = False
    run_migrations: bool = True

    rate_limit_enabled: bool = False
    rate_limit_default: str = "120/minute"

    @field_validator("database_url")
    @classmethod
    def _normalize_database_url(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("DATABASE_URL must not be empty")
        return normalize_database_url(value)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once from the environment."""
    return Settings()

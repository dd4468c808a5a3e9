"""
Storage provider: asyncio SQLAlchemy engine and connection pool.

The engine is created once per application (in the lifespan) and
passed explicitly to every adapter that needs it. Nothing here keeps
a module-level engine.
"""

import logging

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import StaticPool

from users_api.core.config import Settings

logger = logging.getLogger(__name__)


def _is_memory_sqlite(url: str) -> bool:
    parsed = make_url(url)
    return parsed.get_backend_name() == "sqlite" and parsed.database in (None, "", ":memory:")


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Build the async engine and its pool from application settings.

    In-memory SQLite databases live inside a single connection, so they
    get a StaticPool that shares that connection. File databases use the
    default queue pool sized by ``database_pool_size``. Statement logging
    is left to the ``sqlalchemy.engine`` logger, see ``configure_logging``.

    Args:
        settings: Application settings holding the database URL.

    Returns:
        A ready-to-use AsyncEngine.
    """
    url = settings.database_url
    if _is_memory_sqlite(url):
        engine = create_async_engine(
            url,
            poolclass=StaticPool,
        )
    else:
        engine = create_async_engine(
            url,
            pool_size=settings.database_pool_size,
            pool_pre_ping=True,
        )

    logger.info(
        "Database engine created for %s",
        engine.url.render_as_string(hide_password=True),
    )
    return engine

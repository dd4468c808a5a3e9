"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (root/health and users)
- Error handlers (centralized domain-to-HTTP mapping)
- Request logging and rate limiting middleware
- Logging configuration
- Database engine lifecycle and schema migrations

No business logic belongs here. Nothing is built at import time; run it
with ``users-api serve`` or ``uvicorn users_api.main:create_app --factory``.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from users_api.core.config import Settings, get_settings
from users_api.infrastructure.database import create_engine_from_settings
from users_api.infrastructure.migrations import run_migrations
from users_api.interfaces.root import router as root_router
from users_api.interfaces.users.router import router as users_router
from users_api.shared.errors.handlers import register_error_handlers
from users_api.shared.logging import configure_logging
from users_api.shared.middleware import RequestLoggingMiddleware
from users_api.shared.security.rate_limiting import (
    build_limiter,
    rate_limit_exceeded_handler,
)

logger = logging.getLogger(__name__)


def _build_lifespan(settings: Settings):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the engine, bring the schema up to date, dispose on shutdown."""
        engine = create_engine_from_settings(settings)
        try:
            if settings.run_migrations:
                applied = await run_migrations(engine)
                if applied:
                    logger.info("Applied %d migration(s): %s", len(applied), ", ".join(applied))
            app.state.engine = engine
            logger.info("Server running at http://%s:%d", settings.host, settings.port)
            yield
        finally:
            await engine.dispose()
            logger.info("Database engine disposed")

    return lifespan


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers and middleware. The database
    engine is opened by the lifespan and stored on ``app.state.engine``;
    handlers reach it only through dependencies.

    Args:
        settings: Settings to build the app with. Defaults to the
            settings loaded from the environment.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or get_settings()
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=_build_lifespan(settings),
    )
    app.state.settings = settings

    # --- Rate Limiting ---
    app.state.limiter = build_limiter(settings)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Request Logging (outermost, so throttled requests are logged too) ---
    app.add_middleware(RequestLoggingMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(root_router)
    app.include_router(users_router)

    return app


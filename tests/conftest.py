"""
Shared fixtures.

Every test gets its own SQLite file under ``tmp_path``; nothing is
shared between tests.
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from users_api.core.config import Settings
from users_api.infrastructure.database import create_engine_from_settings
from users_api.infrastructure.migrations import run_migrations
from users_api.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a fresh database file, rate limiting off."""
    return Settings(
        _env_file=None,
        database_url=f"sqlite://{tmp_path / 'users.db'}",
        rate_limit_enabled=False,
    )


@pytest.fixture
def client(settings: Settings):
    """TestClient running the full app lifespan (engine + migrations)."""
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest_asyncio.fixture
async def engine(settings: Settings):
    """Migrated engine for repository tests."""
    engine = create_engine_from_settings(settings)
    await run_migrations(engine)
    yield engine
    await engine.dispose()

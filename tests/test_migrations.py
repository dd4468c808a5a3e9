"""
Tests for the schema migration runner.

Runs against a temporary SQLite file per test.
"""

import pytest
from sqlalchemy import text

from users_api.infrastructure.database import create_engine_from_settings
from users_api.infrastructure.migrations import (
    MIGRATIONS,
    Migration,
    MigrationError,
    get_applied_versions,
    run_migrations,
)


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        result = await conn.execute(
            text("SELECT name FROM sqlite_master WHERE type = 'table'")
        )
        return {row[0] for row in result}


class TestMigrationDefinition:
    """Tests for the Migration value object."""

    def test_bundled_versions_are_unique_and_ordered(self) -> None:
        versions = [m.version for m in MIGRATIONS]
        assert versions == sorted(set(versions))

    @pytest.mark.parametrize("version", ["1", "2025-03-09", "2025030912000x"])
    def test_invalid_version_rejected(self, version: str) -> None:
        with pytest.raises(ValueError):
            Migration(version=version, name="bad", statements=())


class TestRunMigrations:
    """Tests for run_migrations()."""

    @pytest.mark.asyncio
    async def test_creates_users_table(self, settings) -> None:
        engine = create_engine_from_settings(settings)
        try:
            applied = await run_migrations(engine)
            assert applied == ["create_users"]
            assert {"users", "schema_migrations"} <= await _table_names(engine)
        finally:
            await engine.dispose()

    @pytest.mark.asyncio
    async def test_second_run_is_noop(self, engine) -> None:
        assert await run_migrations(engine) == []
        assert await get_applied_versions(engine) == {m.version for m in MIGRATIONS}

    @pytest.mark.asyncio
    async def test_applies_only_pending_in_order(self, engine) -> None:
        extra = (
            Migration(
                version="20990101000002",
                name="second",
                statements=("CREATE TABLE second_table (id INTEGER PRIMARY KEY)",),
            ),
            Migration(
                version="20990101000001",
                name="first",
                statements=("CREATE TABLE first_table (id INTEGER PRIMARY KEY)",),
            ),
        )

        applied = await run_migrations(engine, MIGRATIONS + extra)

        assert applied == ["first", "second"]
        assert {"first_table", "second_table"} <= await _table_names(engine)

    @pytest.mark.asyncio
    async def test_failure_keeps_earlier_migrations(self, engine) -> None:
        extra = (
            Migration(
                version="20990101000001",
                name="good",
                statements=("CREATE TABLE good_table (id INTEGER PRIMARY KEY)",),
            ),
            Migration(
                version="20990101000002",
                name="broken",
                statements=("CREATE TABLE users_broken (",),
            ),
        )

        with pytest.raises(MigrationError) as exc_info:
            await run_migrations(engine, MIGRATIONS + extra)

        assert exc_info.value.name == "broken"
        applied = await get_applied_versions(engine)
        assert "20990101000001" in applied
        assert "20990101000002" not in applied

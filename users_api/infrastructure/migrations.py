"""
Schema migrations for the user store.

Migrations are ordered by a UTC timestamp version and recorded in the
``schema_migrations`` table once applied. Each pending migration runs in
its own transaction together with its ledger row, so a failure leaves
the database at the last fully applied version. Re-running is a no-op.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

VERSION_TABLE = "schema_migrations"
UTC_LENGTH = 14


class MigrationError(Exception):
    """Raised when a migration cannot be applied."""

    def __init__(self, version: str, name: str, cause: BaseException) -> None:
        super().__init__(f"Migration {version}_{name} failed: {cause}")
        self.version = version
        self.name = name
        self.cause = cause


@dataclass(frozen=True)
class Migration:
    """A single forward-only schema change.

    Attributes:
        version: 14-digit UTC timestamp, e.g. ``20250309120000``.
        name: Short snake_case description.
        statements: SQL statements executed in order.
    """

    version: str
    name: str
    statements: tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.version) != UTC_LENGTH or not self.version.isdigit():
            raise ValueError(
                f"Migration versions must be a {UTC_LENGTH}-digit UTC timestamp, "
                f"got {self.version!r}"
            )


MIGRATIONS: tuple[Migration, ...] = (
    Migration(
        version="20250309120000",
        name="create_users",
        statements=(
            """
            CREATE TABLE IF NOT EXISTS users (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL,
                email TEXT NOT NULL
            )
            """,
        ),
    ),
)


async def _ensure_version_table(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.execute(
            text(
                f"""
                CREATE TABLE IF NOT EXISTS {VERSION_TABLE} (
                    version TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    applied_at TEXT NOT NULL
                )
                """
            )
        )


async def get_applied_versions(engine: AsyncEngine) -> set[str]:
    """Return the versions already recorded in the migration ledger."""
    await _ensure_version_table(engine)
    async with engine.connect() as conn:
        result = await conn.execute(text(f"SELECT version FROM {VERSION_TABLE}"))
        return {row[0] for row in result}


async def run_migrations(
    engine: AsyncEngine,
    migrations: tuple[Migration, ...] = MIGRATIONS,
) -> list[str]:
    """Apply every pending migration in version order.

    Args:
        engine: Engine of the database to upgrade.
        migrations: Migrations to consider. Defaults to the bundled set.

    Returns:
        Names of the migrations applied by this call, in order.

    Raises:
        MigrationError: If a statement fails. Earlier migrations stay applied.
    """
    applied = await get_applied_versions(engine)
    pending = sorted(
        (m for m in migrations if m.version not in applied),
        key=lambda m: m.version,
    )

    if not pending:
        logger.info("Database schema is up to date (%d migrations).", len(applied))
        return []

    done: list[str] = []
    for migration in pending:
        try:
            async with engine.begin() as conn:
                for statement in migration.statements:
                    await conn.execute(text(statement))
                await conn.execute(
                    text(
                        f"INSERT INTO {VERSION_TABLE} (version, name, applied_at) "
                        "VALUES (:version, :name, :applied_at)"
                    ),
                    {
                        "version": migration.version,
                        "name": migration.name,
                        "applied_at": datetime.now(timezone.utc).isoformat(),
                    },
                )
        except SQLAlchemyError as exc:
            raise MigrationError(migration.version, migration.name, exc) from exc

        logger.info("Applied migration %s_%s", migration.version, migration.name)
        done.append(migration.name)

    return done

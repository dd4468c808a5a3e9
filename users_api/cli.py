"""
CLI entry point for the users API.

Usage:
    # Serve the API (defaults to HOST/PORT from settings, 127.0.0.1:3000)
    users-api serve
    users-api serve --host 0.0.0.0 --port 8080

    # Apply pending schema migrations and exit
    users-api migrate
"""

import argparse
import asyncio
import logging
import sys

from users_api.core.config import get_settings
from users_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def cmd_serve(args: argparse.Namespace) -> None:
    """Start the HTTP server with uvicorn."""
    import uvicorn

    from users_api.main import create_app

    settings = get_settings()
    overrides = {}
    if args.host:
        overrides["host"] = args.host
    if args.port:
        overrides["port"] = args.port
    if overrides:
        settings = settings.model_copy(update=overrides)

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


def cmd_migrate(_args: argparse.Namespace) -> None:
    """Apply pending migrations to the configured database."""
    from users_api.infrastructure.database import create_engine_from_settings
    from users_api.infrastructure.migrations import run_migrations

    settings = get_settings()
    configure_logging(level=settings.log_level, sql_echo=settings.database_echo)

    async def _run() -> list[str]:
        engine = create_engine_from_settings(settings)
        try:
            return await run_migrations(engine)
        finally:
            await engine.dispose()

    applied = asyncio.run(_run())
    if applied:
        logger.info("Applied %d migration(s): %s", len(applied), ", ".join(applied))
    else:
        logger.info("Nothing to migrate.")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Users API CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP server")
    serve_parser.add_argument("--host", default=None, help="Bind address (default: HOST setting)")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT setting)")
    serve_parser.set_defaults(func=cmd_serve)

    migrate_parser = subparsers.add_parser("migrate", help="Apply pending schema migrations")
    migrate_parser.set_defaults(func=cmd_migrate)

    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    sys.exit(main())

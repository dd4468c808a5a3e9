"""
Tests for the command line interface.
"""

import importlib
import sqlite3
from unittest.mock import patch

import pytest

from users_api import cli
from users_api.core.config import get_settings


@pytest.fixture
def env_database(tmp_path, monkeypatch):
    path = tmp_path / "cli.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite://{path}")
    get_settings.cache_clear()
    yield path
    get_settings.cache_clear()


class TestMigrateCommand:
    """Tests for `users-api migrate`."""

    def test_creates_schema(self, env_database) -> None:
        cli.main(["migrate"])

        with sqlite3.connect(env_database) as conn:
            tables = {row[0] for row in conn.execute("SELECT name FROM sqlite_master")}
        assert "users" in tables

    def test_rerun_is_harmless(self, env_database) -> None:
        cli.main(["migrate"])
        cli.main(["migrate"])

        with sqlite3.connect(env_database) as conn:
            count = conn.execute("SELECT COUNT(*) FROM schema_migrations").fetchone()[0]
        assert count == 1


class TestServeCommand:
    """Tests for `users-api serve`."""

    def test_overrides_host_and_port(self, env_database) -> None:
        with patch("uvicorn.run") as run:
            cli.main(["serve", "--host", "0.0.0.0", "--port", "8080"])

        _, kwargs = run.call_args
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 8080

    def test_defaults_to_local_listener(self, env_database) -> None:
        with patch("uvicorn.run") as run:
            cli.main(["serve"])

        _, kwargs = run.call_args
        assert (kwargs["host"], kwargs["port"]) == ("127.0.0.1", 3000)

    def test_builds_a_single_app(self, env_database) -> None:
        with patch("uvicorn.run") as run, patch("users_api.main.create_app") as factory:
            cli.main(["serve", "--port", "8080"])

        factory.assert_called_once()
        (settings,), _ = factory.call_args
        assert settings.port == 8080
        assert run.call_args.args[0] is factory.return_value

    def test_app_module_imports_without_database_url(self, monkeypatch) -> None:
        import users_api.main as main_module

        monkeypatch.delenv("DATABASE_URL", raising=False)
        get_settings.cache_clear()

        reloaded = importlib.reload(main_module)

        assert callable(reloaded.create_app)
        assert not hasattr(reloaded, "app")

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            cli.main([])

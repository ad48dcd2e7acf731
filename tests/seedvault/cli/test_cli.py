"""Tests for the seedvault command-line interface."""

import sqlite3

import pytest
from typer.testing import CliRunner

from seedvault.presentation.api import dependencies
from seedvault.presentation.cli.app import app
from seedvault_config import clear_settings_cache

runner = CliRunner()


def _reset_database_singletons() -> None:
    clear_settings_cache()
    dependencies.get_database_url.cache_clear()
    dependencies.get_engine.cache_clear()
    dependencies.get_session_maker.cache_clear()


@pytest.fixture
def sqlite_file_url(tmp_path, monkeypatch):
    db_path = tmp_path / "data" / "vault.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    _reset_database_singletons()
    yield db_path
    _reset_database_singletons()


class TestSecretsGenerate:
    def test_prints_required_secrets(self):
        result = runner.invoke(app, ["secrets", "generate"])

        assert result.exit_code == 0
        assert "JWT_SECRET_KEY=" in result.output
        assert "POSTGRES_PASSWORD=" in result.output

    def test_values_differ_between_runs(self):
        first = runner.invoke(app, ["secrets", "generate"]).output
        second = runner.invoke(app, ["secrets", "generate"]).output

        assert first != second


class TestDbInit:
    def test_creates_tables(self, sqlite_file_url):
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0, result.output
        assert sqlite_file_url.exists()
        with sqlite3.connect(sqlite_file_url) as conn:
            tables = {
                row[0]
                for row in conn.execute(
                    "SELECT name FROM sqlite_master WHERE type='table'",
                )
            }
        assert {"users", "secrets"} <= tables

    def test_is_idempotent(self, sqlite_file_url):
        assert runner.invoke(app, ["db", "init"]).exit_code == 0

        _reset_database_singletons()
        result = runner.invoke(app, ["db", "init"])

        assert result.exit_code == 0, result.output


def test_no_arguments_shows_help():
    result = runner.invoke(app, [])

    assert "secrets" in result.output
    assert "serve" in result.output

"""Tests for the okozukai command line interface."""

import pytest
from typer.testing import CliRunner

from okozukai.presentation.api.dependencies import clear_engine_cache
from okozukai.presentation.cli.app import app
from okozukai_config.settings import clear_settings_cache

runner = CliRunner()


@pytest.fixture(autouse=True)
def sqlite_database(tmp_path, monkeypatch):
    db_path = tmp_path / "cli" / "okozukai.db"
    db_path.parent.mkdir()
    monkeypatch.setenv("DATABASE_URL_OVERRIDE", f"sqlite+aiosqlite:///{db_path}")
    clear_settings_cache()
    clear_engine_cache()
    yield db_path
    clear_engine_cache()
    clear_settings_cache()


def test_db_init_creates_database_file(sqlite_database):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0, result.output
    assert sqlite_database.exists()
    assert "up to date" in result.output


def test_db_reset_requires_confirmation():
    result = runner.invoke(app, ["db", "reset"], input="n\n")

    assert result.exit_code != 0


def test_db_reset_with_yes():
    result = runner.invoke(app, ["db", "reset", "--yes"])

    assert result.exit_code == 0, result.output


def test_seed_then_seed_again_is_skipped():
    first = runner.invoke(app, ["seed"])
    assert first.exit_code == 0, first.output
    assert "Transactions" in first.output

    second = runner.invoke(app, ["seed"])
    assert second.exit_code == 0, second.output
    assert "skipped" in second.output

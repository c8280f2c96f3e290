"""Tests for the wikicomplete command-line interface."""

import sqlite3

import pytest
from loguru import logger
from typer.testing import CliRunner

from wikicomplete.main import cli

runner = CliRunner()


@pytest.fixture
def notes_db(tmp_path):
    path = tmp_path / "markdown_data.db"
    connection = sqlite3.connect(path)
    connection.executescript(
        """
        CREATE TABLE files (path TEXT);
        INSERT INTO files VALUES ('notes/project-a.md'), ('notes/other.md');
        """
    )
    connection.commit()
    connection.close()
    return path


@pytest.fixture(autouse=True)
def isolated_logs(tmp_path, monkeypatch):
    monkeypatch.setattr("wikicomplete.logger.default_log_path", lambda: tmp_path / "wikicomplete.log")
    monkeypatch.setattr("wikicomplete.logger._log_file_path", None)
    yield
    logger.remove()


class TestCli:
    def test_triggers_lists_defaults(self):
        result = runner.invoke(cli, ["triggers"])

        assert result.exit_code == 0
        assert "FilePath" in result.stdout
        assert "Tag" in result.stdout

    def test_suggest_uses_embedded_executor(self, tmp_path, notes_db):
        config = tmp_path / "config.json"
        config.write_text('{"executor": "sqlite"}', encoding="utf-8")

        result = runner.invoke(cli, ["suggest", "See [[proj", "--config", str(config), "--db", str(notes_db)])

        assert result.exit_code == 0
        assert "project-a.md" in result.stdout
        assert "other.md" not in result.stdout

    def test_suggest_without_trigger_fails(self):
        result = runner.invoke(cli, ["suggest", "plain text"])

        assert result.exit_code == 1
        assert "No trigger" in result.stdout

    def test_suggest_short_prefix_fails(self):
        result = runner.invoke(cli, ["suggest", "See [[p"])

        assert result.exit_code == 1
        assert "shorter than" in result.stdout

    def test_missing_config_fails(self, tmp_path):
        result = runner.invoke(cli, ["triggers", "--config", str(tmp_path / "missing.json")])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.stdout

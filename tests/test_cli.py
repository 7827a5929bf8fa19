"""Tests for the Typer CLI against temporary config and data directories."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from clipstack.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture()
def dirs(tmp_path):
    return ["--config-dir", str(tmp_path / "config"), "--data-dir", str(tmp_path / "data")]


@pytest.fixture()
def registry_file(tmp_path):
    return tmp_path / "data" / "registry.json"


def _invoke(dirs, *args):
    return runner.invoke(app, [*dirs, *args])


class TestHistoryCommands:
    def test_list_empty(self, dirs):
        result = _invoke(dirs, "list")
        assert result.exit_code == 0
        assert "History is empty" in result.output

    def test_add_persists(self, dirs, registry_file):
        assert _invoke(dirs, "add", "hello").exit_code == 0
        assert _invoke(dirs, "add", "world").exit_code == 0
        assert json.loads(registry_file.read_text(encoding="utf-8")) == ["hello", "world"]

    def test_add_duplicate(self, dirs, registry_file):
        _invoke(dirs, "add", "hello")
        result = _invoke(dirs, "add", "hello")
        assert result.exit_code == 0
        assert "Already in history" in result.output
        assert json.loads(registry_file.read_text(encoding="utf-8")) == ["hello"]

    def test_list_shows_entries(self, dirs):
        _invoke(dirs, "add", "alpha")
        result = _invoke(dirs, "list")
        assert result.exit_code == 0
        assert "alpha" in result.output

    def test_remove(self, dirs, registry_file):
        for text in ("a", "b", "c"):
            _invoke(dirs, "add", text)
        result = _invoke(dirs, "remove", "1")
        assert result.exit_code == 0
        assert json.loads(registry_file.read_text(encoding="utf-8")) == ["b", "c"]

    def test_remove_out_of_range(self, dirs):
        _invoke(dirs, "add", "a")
        result = _invoke(dirs, "remove", "5")
        assert result.exit_code == 1
        assert "No entry at index 5" in result.output

    def test_clear_keeps_newest(self, dirs, registry_file):
        for text in ("a", "b", "c"):
            _invoke(dirs, "add", text)
        result = _invoke(dirs, "clear")
        assert result.exit_code == 0
        assert json.loads(registry_file.read_text(encoding="utf-8")) == ["c"]

    def test_add_respects_history_size(self, dirs, registry_file):
        _invoke(dirs, "config", "set", "history-size", "2")
        for text in ("a", "b", "c"):
            _invoke(dirs, "add", text)
        assert json.loads(registry_file.read_text(encoding="utf-8")) == ["b", "c"]

    def test_path(self, dirs):
        result = _invoke(dirs, "path")
        assert result.exit_code == 0
        assert "registry.json" in result.output
        assert "settings.json" in result.output


class TestConfigCommands:
    def test_show_defaults(self, dirs):
        result = _invoke(dirs, "config", "show")
        assert result.exit_code == 0
        assert "history-size" in result.output

    def test_set_and_show(self, dirs, tmp_path):
        result = _invoke(dirs, "config", "set", "preview-size", "20")
        assert result.exit_code == 0
        data = json.loads((tmp_path / "config" / "settings.json").read_text(encoding="utf-8"))
        assert data["preview-size"] == 20

    def test_set_unknown_key(self, dirs):
        result = _invoke(dirs, "config", "set", "colour", "teal")
        assert result.exit_code == 1
        assert "Unknown setting" in result.output

    def test_set_invalid_value(self, dirs):
        result = _invoke(dirs, "config", "set", "history-size", "zero")
        assert result.exit_code == 1

    def test_set_unwritable_config_dir(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")
        result = runner.invoke(
            app,
            ["--config-dir", str(blocker / "config"), "--data-dir", str(tmp_path / "data"),
             "config", "set", "history-size", "3"],
        )
        assert result.exit_code == 1
        assert "Cannot write settings" in result.output

    def test_reset(self, dirs, tmp_path):
        _invoke(dirs, "config", "set", "history-size", "3")
        result = _invoke(dirs, "config", "reset")
        assert result.exit_code == 0
        assert not (tmp_path / "config" / "settings.json").exists()

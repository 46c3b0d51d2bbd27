"""Tests for the command line interface."""

import json
import logging
from datetime import date

import pytest
from click.testing import CliRunner

from daybook.cli import _log_level, main
from daybook.config import Config
from daybook.workflows import load_day


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    monkeypatch.setattr("daybook.cli.load_config", lambda: Config(data_dir=str(tmp_path)))
    return tmp_path


@pytest.fixture
def runner():
    return CliRunner()


class TestDayCommands:
    def test_show_empty_day(self, runner, data_dir):
        result = runner.invoke(main, ["show", "--date", "2025-01-15"])
        assert result.exit_code == 0
        assert "No todos." in result.output
        assert not any(data_dir.iterdir())

    def test_add_and_show(self, runner, data_dir):
        runner.invoke(main, ["add", "Buy milk", "-d", "2025-01-15"])
        result = runner.invoke(main, ["show", "-d", "2025-01-15"])

        assert result.exit_code == 0
        assert "[ ] Buy milk" in result.output

    def test_show_json(self, runner, data_dir):
        runner.invoke(main, ["add", "Buy milk", "-d", "2025-01-15"])
        result = runner.invoke(main, ["show", "-d", "2025-01-15", "--json"])

        data = json.loads(result.output)
        assert data["date"] == "2025-01-15"
        assert data["todos"][0]["text"] == "Buy milk"

    def test_done_toggles(self, runner, data_dir):
        runner.invoke(main, ["add", "Buy milk", "-d", "2025-01-15"])
        result = runner.invoke(main, ["done", "1", "-d", "2025-01-15"])

        assert result.exit_code == 0
        assert load_day("2025-01-15", data_dir).todos[0].completed is True

    def test_done_bad_index(self, runner, data_dir):
        result = runner.invoke(main, ["done", "3", "-d", "2025-01-15"])
        assert result.exit_code == 2

    def test_note(self, runner, data_dir):
        runner.invoke(main, ["note", "Quiet day", "-d", "2025-01-15"])
        assert load_day("2025-01-15", data_dir).notes == "Quiet day"

    def test_move(self, runner, data_dir):
        runner.invoke(main, ["add", "Call bank", "-d", "2025-01-15"])
        result = runner.invoke(main, ["move", "1", "2025-01-20", "-d", "2025-01-15"])

        assert result.exit_code == 0
        assert load_day("2025-01-15", data_dir).todos == []
        assert [t.text for t in load_day("2025-01-20", data_dir).todos] == ["Call bank"]

    def test_flag_and_carry_over(self, runner, data_dir):
        runner.invoke(main, ["add", "Call bank", "-d", "2025-01-15"])
        runner.invoke(main, ["flag", "1", "-d", "2025-01-15"])
        result = runner.invoke(main, ["carry-over", "-d", "2025-01-15"])

        assert "Carried over 1 todos" in result.output
        assert [t.text for t in load_day(date(2025, 1, 16), data_dir).todos] == ["Call bank"]

    def test_delete(self, runner, data_dir):
        for text in ("a", "b", "c"):
            runner.invoke(main, ["add", text, "-d", "2025-01-15"])
        result = runner.invoke(main, ["delete", "2", "-d", "2025-01-15"])

        assert result.exit_code == 0
        assert "Deleted: b" in result.output
        assert [t.text for t in load_day("2025-01-15", data_dir).todos] == ["a", "c"]

    def test_edit_notes_shown(self, runner, data_dir):
        runner.invoke(main, ["add", "Call bank", "-d", "2025-01-15"])
        result = runner.invoke(main, ["edit", "1", "--notes", "ask about fees", "-d", "2025-01-15"])

        assert result.exit_code == 0
        todo = load_day("2025-01-15", data_dir).todos[0]
        assert (todo.text, todo.notes) == ("Call bank", "ask about fees")
        assert "ask about fees" in runner.invoke(main, ["show", "-d", "2025-01-15"]).output

    def test_edit_text(self, runner, data_dir):
        runner.invoke(main, ["add", "Call bank", "-d", "2025-01-15"])
        result = runner.invoke(main, ["edit", "1", "--text", "Call the bank", "-d", "2025-01-15"])

        assert "Updated: Call the bank" in result.output
        assert load_day("2025-01-15", data_dir).todos[0].text == "Call the bank"

    def test_edit_needs_an_option(self, runner, data_dir):
        runner.invoke(main, ["add", "Call bank", "-d", "2025-01-15"])
        result = runner.invoke(main, ["edit", "1", "-d", "2025-01-15"])
        assert result.exit_code == 2

    def test_reorder(self, runner, data_dir):
        for text in ("a", "b", "c"):
            runner.invoke(main, ["add", text, "-d", "2025-01-15"])
        result = runner.invoke(main, ["reorder", "3", "1", "-d", "2025-01-15"])

        assert result.exit_code == 0
        assert [t.text for t in load_day("2025-01-15", data_dir).todos] == ["c", "a", "b"]

    def test_reorder_bad_position(self, runner, data_dir):
        runner.invoke(main, ["add", "a", "-d", "2025-01-15"])
        result = runner.invoke(main, ["reorder", "1", "5", "-d", "2025-01-15"])

        assert result.exit_code == 1
        assert "out of range" in result.output

    def test_bad_date_reports_error(self, runner, data_dir):
        result = runner.invoke(main, ["show", "-d", "15/01/2025"])

        assert result.exit_code == 1
        assert "Invalid date format" in result.output


class TestMigrateCommand:
    def test_nothing_to_migrate(self, runner, data_dir):
        result = runner.invoke(main, ["migrate"])
        assert result.exit_code == 0
        assert "No calendar events to migrate" in result.output

    def test_corrupt_legacy_file(self, runner, data_dir):
        (data_dir / "calendar_events.json").write_text("{oops")
        result = runner.invoke(main, ["migrate"])
        assert result.exit_code == 1
        assert "Error:" in result.output


class TestPreferenceCommands:
    def test_zoom_default(self, runner, data_dir):
        result = runner.invoke(main, ["zoom"])
        assert result.output.strip() == "1.00"

    def test_zoom_set(self, runner, data_dir):
        assert runner.invoke(main, ["zoom", "1.5"]).exit_code == 0
        assert runner.invoke(main, ["zoom"]).output.strip() == "1.50"

    def test_zoom_out_of_range(self, runner, data_dir):
        result = runner.invoke(main, ["zoom", "5"])
        assert result.exit_code == 1
        assert "outside supported range" in result.output

    def test_zoom_limits(self, runner, data_dir):
        result = runner.invoke(main, ["zoom-limits"])
        assert json.loads(result.output) == {"min_zoom": 0.5, "max_zoom": 3.0}

    def test_dark_mode(self, runner, data_dir):
        assert runner.invoke(main, ["dark-mode"]).output.strip() == "off"
        runner.invoke(main, ["dark-mode", "on"])
        assert runner.invoke(main, ["dark-mode"]).output.strip() == "on"


class TestLogLevel:
    def test_named_levels(self):
        assert _log_level("INFO") == logging.INFO
        assert _log_level("DEBUG") == logging.DEBUG

    def test_non_level_attribute_falls_back(self):
        assert _log_level("basic_format") == logging.WARNING
        assert _log_level("BASIC_FORMAT") == logging.WARNING
        assert _log_level("LOUD") == logging.WARNING

    def test_bad_config_level_still_runs(self, runner, tmp_path, monkeypatch):
        config = Config(data_dir=str(tmp_path), log_level="BASIC_FORMAT")
        monkeypatch.setattr("daybook.cli.load_config", lambda: config)

        result = runner.invoke(main, ["zoom"])

        assert result.exit_code == 0
        assert result.output.strip() == "1.00"

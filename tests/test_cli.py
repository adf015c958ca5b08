"""Tests for the command line interface."""

import pytest
import yaml
from typer.testing import CliRunner

from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.terminal.app import app

runner = CliRunner()

TASKS = {
    "tasks": [
        {
            "id": "1",
            "key": "PRJ-1",
            "title": "Checkout redesign",
            "type": "epic",
            "start_date": "2024-03-01",
            "due_date": "2024-04-15",
        },
        {
            "id": "2",
            "key": "PRJ-2",
            "title": "Payment form",
            "type": "story",
            "parent_id": "1",
            "status": {"name": "In Progress"},
            "start_date": "2024-03-10",
            "due_date": "2024-03-20",
        },
        {"id": "3", "key": "PRJ-3", "title": "Unscheduled bug", "type": "bug"},
    ]
}


@pytest.fixture
def tasks_file(tmp_path):
    path = tmp_path / "tasks.yaml"
    path.write_text(yaml.safe_dump(TASKS, sort_keys=False))
    return path


def test_view(tasks_file):
    result = runner.invoke(app, ["view", str(tasks_file), "--zoom", "month", "--now", "2024-03-15"])
    assert result.exit_code == 0, result.output
    assert "PRJ-1" in result.output
    assert "PRJ-2" in result.output
    assert "March" in result.output


def test_view_alias_and_filters(tasks_file):
    result = runner.invoke(
        app, ["v", str(tasks_file), "-z", "week", "--now", "2024-03-15", "--type", "bug"]
    )
    assert result.exit_code == 0, result.output
    assert "PRJ-3" in result.output
    assert "PRJ-1" not in result.output


def test_view_uses_configured_tasks_path(tasks_file):
    CONFIGURATION_REPO.update_config(tasks_path=str(tasks_file))
    result = runner.invoke(app, ["view", "--zoom", "day", "--now", "2024-03-15"])
    assert result.exit_code == 0, result.output
    assert "PRJ-2" in result.output


def test_view_rejects_unknown_zoom(tasks_file):
    result = runner.invoke(app, ["view", str(tasks_file), "--zoom", "year"])
    assert result.exit_code == 2


def test_view_missing_file(tmp_path):
    result = runner.invoke(app, ["view", str(tmp_path / "missing.yaml")])
    assert result.exit_code == 2


def test_zoom(tasks_file):
    result = runner.invoke(
        app,
        [
            "zoom",
            str(tasks_file),
            "--from",
            "month",
            "--to",
            "day",
            "--scroll-offset",
            "0",
            "--viewport-width",
            "600",
            "--now",
            "2024-03-15",
        ],
    )
    assert result.exit_code == 0, result.output
    assert "scroll offset: 0.0" in result.output


def test_reschedule(tasks_file):
    result = runner.invoke(
        app,
        ["reschedule", str(tasks_file), "2", "--delta-x", "40", "--zoom", "day", "--now", "2024-03-15"],
    )
    assert result.exit_code == 0, result.output
    saved = yaml.safe_load(tasks_file.read_text())
    moved = next(task for task in saved["tasks"] if task["id"] == "2")
    assert str(moved["start_date"]) == "2024-03-11"
    assert str(moved["due_date"]) == "2024-03-21"


def test_reschedule_by_one_week_column(tasks_file):
    result = runner.invoke(
        app,
        ["reschedule", str(tasks_file), "2", "--delta-x", "120", "--zoom", "week", "--now", "2024-03-15"],
    )
    assert result.exit_code == 0, result.output
    saved = yaml.safe_load(tasks_file.read_text())
    moved = next(task for task in saved["tasks"] if task["id"] == "2")
    assert str(moved["start_date"]) == "2024-03-17"
    assert str(moved["due_date"]) == "2024-03-27"


def test_reschedule_small_drag_leaves_file(tasks_file):
    before = tasks_file.read_text()
    result = runner.invoke(
        app, ["r", str(tasks_file), "2", "--delta-x", "5", "--zoom", "day", "--now", "2024-03-15"]
    )
    assert result.exit_code == 0, result.output
    assert "not moved" in result.output
    assert tasks_file.read_text() == before


def test_reschedule_unknown_task(tasks_file):
    result = runner.invoke(app, ["reschedule", str(tasks_file), "99", "--delta-x", "40"])
    assert result.exit_code == 2


def test_config_set_and_view():
    result = runner.invoke(app, ["config", "set", "--default-zoom-level", "Week", "--column-width-px", "90"])
    assert result.exit_code == 0, result.output
    config = CONFIGURATION_REPO.get_config()
    assert config["default_zoom_level"] == "week"
    assert config["column_width_px"] == 90

    result = runner.invoke(app, ["c", "v"])
    assert result.exit_code == 0, result.output
    assert "default_zoom_level" in result.output


def test_config_rejects_unknown_zoom():
    result = runner.invoke(app, ["config", "set", "--default-zoom-level", "year"])
    assert result.exit_code == 2

"""Tests for task date resolution."""

from roadmap.service.task_dates import (
    resolve_end,
    resolve_start,
    resolve_task_interval,
)


def test_both_dates_present(now):
    interval = resolve_task_interval(
        {"id": "1", "start_date": "2024-03-10", "due_date": "2024-03-20"}, now
    )
    assert interval["start"].format("YYYY-MM-DD") == "2024-03-10"
    assert interval["end"].format("YYYY-MM-DD") == "2024-03-20"
    assert interval["has_missing_dates"] is False


def test_rfc3339_fields_are_used_as_fallback(now):
    task = {
        "id": "1",
        "start_date": None,
        "start_date_rfc3339": "2024-03-10T09:00:00Z",
        "due_date_rfc3339": "2024-03-20T17:00:00Z",
    }
    assert resolve_start(task, now).format("YYYY-MM-DD HH:mm") == "2024-03-10 09:00"
    assert resolve_end(task, now).format("YYYY-MM-DD HH:mm") == "2024-03-20 17:00"


def test_first_field_wins(now):
    task = {"id": "1", "start_date": "2024-03-01", "start_date_rfc3339": "2024-03-05"}
    assert resolve_start(task, now).day == 1


def test_start_only_synthesizes_seven_day_span(now):
    interval = resolve_task_interval({"id": "1", "start_date": "2024-03-10"}, now)
    assert interval["end"] == interval["start"].add(days=7)
    assert interval["has_missing_dates"] is False


def test_end_only_starts_now_and_is_flagged(now):
    interval = resolve_task_interval({"id": "1", "due_date": "2024-04-01"}, now)
    assert interval["start"] == now
    assert interval["end"].format("YYYY-MM-DD") == "2024-04-01"
    assert interval["has_missing_dates"] is True


def test_no_dates_anchor_at_now(now):
    interval = resolve_task_interval({"id": "1"}, now)
    assert interval["start"] == now
    assert interval["end"] == now.add(days=7)
    assert interval["has_missing_dates"] is True


def test_unparseable_start_counts_as_absent(now):
    interval = resolve_task_interval(
        {"id": "1", "start_date": "soon", "due_date": "2024-04-01"}, now
    )
    assert interval["start"] == now
    assert interval["has_missing_dates"] is True

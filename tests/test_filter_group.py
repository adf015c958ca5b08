"""Tests for task filtering and grouping."""

from roadmap.query.filter import filter_tasks, normalize_status_name
from roadmap.query.group import group_tasks

TASKS = [
    {
        "id": "1",
        "key": "PRJ-1",
        "title": "Checkout redesign",
        "type": "epic",
        "status": {"name": "In Progress"},
        "assignee": {"name": "Dana Scully"},
    },
    {
        "id": "2",
        "key": "PRJ-2",
        "title": "Payment form",
        "type": "story",
        "parent_id": "1",
        "status": {"name": "Done"},
        "assignee": {"profile": {"first_name": "Fox", "last_name": "Mulder"}},
    },
    {"id": "3", "key": "PRJ-3", "title": "Fix login bug", "type": "bug"},
    {"id": "4", "key": "OPS-1", "title": "Server setup", "type": "task", "parent_id": "5"},
    {"id": "5", "key": "OPS-0", "title": "Infrastructure", "type": "task"},
]


def ids(tasks):
    return [task["id"] for task in tasks]


def test_no_criteria_keeps_order():
    assert filter_tasks(TASKS) == TASKS
    assert filter_tasks(TASKS, query="  ", types=[], statuses=[], assignees=[]) == TASKS


def test_search_matches_title_and_key():
    assert ids(filter_tasks(TASKS, query="PAYMENT")) == ["2"]
    assert ids(filter_tasks(TASKS, query="ops-")) == ["4", "5"]


def test_type_filter():
    assert ids(filter_tasks(TASKS, types=["bug", "epic"])) == ["1", "3"]


def test_status_filter_normalizes_names():
    assert normalize_status_name(TASKS[0]) == "in_progress"
    assert normalize_status_name(TASKS[2]) == "todo"
    assert ids(filter_tasks(TASKS, statuses=["todo"])) == ["3", "4", "5"]
    assert ids(filter_tasks(TASKS, statuses=["in_progress", "done"])) == ["1", "2"]


def test_assignee_filter_uses_name_or_profile():
    assert ids(filter_tasks(TASKS, assignees=["Fox Mulder"])) == ["2"]
    assert ids(filter_tasks(TASKS, assignees=["Dana Scully", "Fox Mulder"])) == ["1", "2"]


def test_grouping():
    groups = group_tasks(TASKS)
    assert ids(groups["epics"]) == ["1", "5"]
    assert ids(groups["others"]) == ["2", "4"]
    assert ids(groups["standalone"]) == ["3"]
    assert ids(groups["children_map"]["1"]) == ["2"]
    assert ids(groups["children_map"]["5"]) == ["4"]


def test_epic_with_parent_is_not_a_child():
    tasks = [
        {"id": "1", "type": "epic"},
        {"id": "2", "type": "epic", "parent_id": "1"},
    ]
    groups = group_tasks(tasks)
    assert groups["children_map"] == {}
    assert ids(groups["epics"]) == ["1", "2"]
    assert groups["standalone"] == []

"""Tests for status based progress."""

import pytest

from roadmap.query.group import group_tasks
from roadmap.service.progress import epic_progress, task_progress


@pytest.mark.parametrize(
    "task, expected",
    [
        ({"id": "1", "status": {"name": "Done"}}, 100),
        ({"id": "1", "status": {"name": "Anything", "category": "done"}}, 100),
        ({"id": "1", "resolved": True}, 100),
        ({"id": "1", "status": {"name": "In Progress"}}, 50),
        ({"id": "1", "status": {"name": "Doing", "category": "in_progress"}}, 50),
        ({"id": "1", "status": {"name": "Testing"}}, 75),
        ({"id": "1", "status": {"name": "In Review"}}, 75),
        ({"id": "1", "status": {"name": "To Do"}}, 0),
        ({"id": "1"}, 0),
    ],
)
def test_task_progress(task, expected):
    assert task_progress(task) == expected


def test_epic_progress_from_children():
    tasks = [
        {"id": "e", "type": "epic"},
        {"id": "a", "parent_id": "e", "status": {"name": "Done"}},
        {"id": "b", "parent_id": "e", "status": {"name": "Review"}},
        {"id": "c", "parent_id": "e", "status": {"name": "To Do"}},
    ]
    groups = group_tasks(tasks)
    assert epic_progress("e", tasks, groups["children_map"]) == 50


def test_epic_without_children_uses_own_status():
    tasks = [{"id": "e", "type": "epic", "status": {"name": "In Progress"}}]
    assert epic_progress("e", tasks, {}) == 50
    assert epic_progress("missing", tasks, {}) == 0

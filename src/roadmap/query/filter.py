# SPDX-License-Identifier: MIT

from typing import Optional

from roadmap.model.task import Task


def normalize_status_name(task: Task) -> str:
    """Lower-case the status name and join its first two words with an underscore."""
    status = task.get("status")
    if not status or not status.get("name"):
        return "todo"
    return status["name"].lower().replace(" ", "_", 1)


def assignee_name(task: Task) -> Optional[str]:
    assignee = task.get("assignee")
    if not assignee:
        return None
    if assignee.get("name"):
        return assignee.get("name")
    profile = assignee.get("profile")
    if profile:
        return f"{profile['first_name']} {profile['last_name']}"
    return ""


def filter_tasks(
    tasks: list[Task],
    query: Optional[str] = None,
    types: Optional[list[str]] = None,
    statuses: Optional[list[str]] = None,
    assignees: Optional[list[str]] = None,
) -> list[Task]:
    """
    Narrow a task list by search text, type, status, and assignee.

    Every criterion that is empty or None is skipped, and the relative order
    of the input is preserved.

    Args:
        tasks: Tasks to filter
        query: Case-insensitive substring matched against title and key
        types: Task types to keep
        statuses: Normalized status names to keep, e.g. "in_progress"
        assignees: Assignee display names to keep

    Returns:
        The tasks matching every criterion
    """
    filtered = tasks

    if query is not None and query.strip():
        needle = query.lower()
        filtered = [
            task
            for task in filtered
            if needle in (task.get("title") or "").lower()
            or needle in (task.get("key") or "").lower()
        ]

    if types:
        filtered = [task for task in filtered if task.get("type") in types]

    if statuses:
        filtered = [
            task for task in filtered if normalize_status_name(task) in statuses
        ]

    if assignees:
        # Unassigned tasks never match an assignee filter
        filtered = [task for task in filtered if assignee_name(task) in assignees]

    return filtered

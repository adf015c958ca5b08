# SPDX-License-Identifier: MIT

from roadmap.model.entity_id import EntityId
from roadmap.model.task import Task

DONE_NAMES = {"done", "resolved"}
IN_PROGRESS_NAMES = {"in progress", "in_progress"}
REVIEW_NAMES = {"testing", "review", "in review"}


def _status_name(task: Task) -> str:
    status = task.get("status")
    if not status or not status.get("name"):
        return ""
    return status["name"].lower()


def _status_category(task: Task) -> str:
    status = task.get("status")
    if not status or not status.get("category"):
        return ""
    return str(status["category"]).lower()


def is_done(task: Task) -> bool:
    return (
        _status_name(task) in DONE_NAMES
        or _status_category(task) == "done"
        or task.get("resolved") is True
    )


def is_in_progress(task: Task) -> bool:
    """Testing and review count as in progress."""
    return (
        _status_name(task) in IN_PROGRESS_NAMES | REVIEW_NAMES
        or _status_category(task) == "in_progress"
    )


def task_progress(task: Task) -> int:
    if is_done(task):
        return 100
    if _status_name(task) in IN_PROGRESS_NAMES or _status_category(task) == "in_progress":
        return 50
    if _status_name(task) in REVIEW_NAMES:
        return 75
    return 0


def epic_progress(
    epic_id: EntityId, tasks: list[Task], children_map: dict[EntityId, list[Task]]
) -> int:
    """
    Percentage complete for an epic.

    Epics without children report their own status. Otherwise done children
    count fully and in-progress children count half.
    """
    children = children_map.get(epic_id, [])
    if not children:
        epic = next((task for task in tasks if task["id"] == epic_id), None)
        return task_progress(epic) if epic is not None else 0

    done = sum(1 for child in children if is_done(child))
    in_progress = sum(
        1 for child in children if not is_done(child) and is_in_progress(child)
    )
    return round((done * 100 + in_progress * 50) / len(children))

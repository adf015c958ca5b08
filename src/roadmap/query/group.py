# SPDX-License-Identifier: MIT

from roadmap.model.entity_id import EntityId
from roadmap.model.group import TaskGroups
from roadmap.model.task import Task


def group_tasks(tasks: list[Task]) -> TaskGroups:
    """
    Split tasks into epics, their children, and standalone tasks.

    Any task referenced as a parent is treated as an epic even when its own
    type says otherwise. Epics are never children.
    """
    children = [
        task
        for task in tasks
        if task.get("parent_id") is not None and task.get("type") != "epic"
    ]
    parent_ids = {task["parent_id"] for task in children}
    epics = [
        task for task in tasks if task.get("type") == "epic" or task["id"] in parent_ids
    ]
    epic_ids = {task["id"] for task in epics}
    standalone = [
        task
        for task in tasks
        if task["id"] not in epic_ids
        and task.get("parent_id") is None
        and task.get("type") != "epic"
    ]

    children_map: dict[EntityId, list[Task]] = {}
    for task in children:
        children_map.setdefault(task["parent_id"], []).append(task)  # type: ignore[arg-type]

    return {
        "epics": epics,
        "others": children,
        "children_map": children_map,
        "standalone": standalone,
    }

# SPDX-License-Identifier: MIT

from typing import TypedDict

from roadmap.model.entity_id import EntityId
from roadmap.model.task import Task


class TaskGroups(TypedDict):
    epics: list[Task]
    others: list[Task]
    children_map: dict[EntityId, list[Task]]
    standalone: list[Task]

# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

from roadmap.model.entity_id import EntityId
from roadmap.time import DateValue


class TaskStatus(TypedDict):
    name: str
    category: NotRequired[Optional[str]]


class AssigneeProfile(TypedDict):
    first_name: str
    last_name: str


class Assignee(TypedDict):
    id: NotRequired[Optional[EntityId]]
    name: NotRequired[Optional[str]]
    profile: NotRequired[Optional[AssigneeProfile]]


class Task(TypedDict):
    id: EntityId
    key: NotRequired[Optional[str]]
    title: NotRequired[Optional[str]]
    type: NotRequired[Optional[str]]
    parent_id: NotRequired[Optional[EntityId]]
    status: NotRequired[Optional[TaskStatus]]
    priority: NotRequired[Optional[str]]
    assignee: NotRequired[Optional[Assignee]]
    labels: NotRequired[Optional[list[str]]]
    resolved: NotRequired[Optional[bool]]
    color: NotRequired[Optional[str]]
    # Two historical field schemes carry the same dates, first one wins
    start_date: NotRequired[Optional[DateValue]]
    start_date_rfc3339: NotRequired[Optional[DateValue]]
    due_date: NotRequired[Optional[DateValue]]
    due_date_rfc3339: NotRequired[Optional[DateValue]]

# SPDX-License-Identifier: MIT

from typing import TypedDict

from roadmap.model.entity_id import EntityId
from roadmap.model.zoom_level import ZoomLevel


class ScrollMetrics(TypedDict):
    scroll_offset: float
    content_width: float
    viewport_width: float


class ZoomTransition(TypedDict):
    from_zoom: ZoomLevel
    to_zoom: ZoomLevel
    scroll_fraction: float


class DragState(TypedDict):
    dragging_task_id: EntityId
    drag_start_x: float


class RescheduleRequest(TypedDict):
    task_id: EntityId
    start_date: str
    due_date: str

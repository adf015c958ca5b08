# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum
from loguru import logger

from roadmap.configuration import Configuration
from roadmap.model.date_window import DateWindow
from roadmap.model.entity_id import EntityId
from roadmap.model.interaction import DragState, RescheduleRequest
from roadmap.model.task import Task
from roadmap.model.zoom_level import ZoomLevel
from roadmap.service.task_dates import resolve_end, resolve_start
from roadmap.service.zoom import column_width_px
from roadmap.time import datetime_to_date_str


def start_drag(task_id: EntityId, start_x: float) -> DragState:
    return {"dragging_task_id": task_id, "drag_start_x": start_x}


def calculate_days_moved(
    delta_x: float,
    rendered_columns_count: int,
    total_days: int,
    zoom_level: ZoomLevel,
    config: Configuration,
) -> int:
    """
    Translate a horizontal pixel delta into whole calendar days.

    Args:
        delta_x: Pointer movement in pixels, positive to the right
        rendered_columns_count: Columns drawn on the timeline, each one
            column width wide
        total_days: Days covered by the visible window
        zoom_level: The zoom level in effect during the drag
        config: Configuration providing the column pixel widths

    Returns:
        Days to shift the task by, rounded half up
    """
    timeline_width = rendered_columns_count * column_width_px(zoom_level, config)
    if timeline_width <= 0:
        return 0
    return math.floor(delta_x / timeline_width * total_days + 0.5)


def end_drag(
    drag: DragState,
    release_x: float,
    task: Task,
    window: DateWindow,
    rendered_columns_count: int,
    zoom_level: ZoomLevel,
    config: Configuration,
    now: pendulum.DateTime,
) -> Optional[RescheduleRequest]:
    """
    Finish a drag and compute the rescheduled task dates.

    The drag state is consumed here; callers discard it afterwards. Tasks
    without a start date and drags shorter than half a day are not moved.

    Returns:
        The reschedule request for the update collaborator, or None
    """
    if drag["dragging_task_id"] != task["id"]:
        raise ValueError(
            f"Drag started on task {drag['dragging_task_id']} but ended on {task['id']}"
        )

    delta_x = release_x - drag["drag_start_x"]
    days_moved = calculate_days_moved(
        delta_x, rendered_columns_count, window["total_days"], zoom_level, config
    )

    start = resolve_start(task, now)
    if days_moved == 0 or start is None:
        logger.debug(
            "Drag of task {} moved {} days, nothing to do", task["id"], days_moved
        )
        return None

    end = resolve_end(task, now)
    new_start = start.add(days=days_moved)
    # A task without an end date ends on its new start
    new_end = end.add(days=days_moved) if end is not None else new_start

    logger.debug("Drag of task {} moved {} days", task["id"], days_moved)
    return {
        "task_id": task["id"],
        "start_date": datetime_to_date_str(new_start),
        "due_date": datetime_to_date_str(new_end),
    }

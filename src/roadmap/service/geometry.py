# SPDX-License-Identifier: MIT

import pendulum

from roadmap.model.date_window import DateWindow
from roadmap.model.geometry import TaskBarGeometry
from roadmap.model.task import Task
from roadmap.service.task_dates import resolve_task_interval
from roadmap.time import calendar_days_between

MIN_WIDTH_PERCENT = 2.0
STUB_OPACITY = 0.5


def map_task_geometry(
    task: Task,
    window: DateWindow,
    columns_count: int,
    now: pendulum.DateTime,
) -> TaskBarGeometry:
    """
    Map a task's date interval onto left/width percentages of the timeline.

    Tasks entirely outside the window are drawn as a 2% stub pinned to the
    edge they fell off. Visible tasks are clipped to the window and never
    narrower than 2% so they remain clickable.

    Args:
        task: The task to position
        window: The visible date window
        columns_count: Day columns for day zoom, otherwise the window's total days
        now: The current instant, used for tasks with missing dates

    Returns:
        The bar geometry for the task
    """
    interval = resolve_task_interval(task, now)
    has_missing_dates = interval["has_missing_dates"]

    # Offsets are counted in calendar days so the time of day never shifts a bar
    window_start = window["start"].start_of("day")
    start_offset_days = calendar_days_between(
        window_start, interval["start"].start_of("day")
    )
    # +1 makes the end day inclusive
    end_offset_days = (
        calendar_days_between(window_start, interval["end"].start_of("day")) + 1
    )

    show_left_arrow = start_offset_days < 0
    show_right_arrow = end_offset_days > columns_count

    if end_offset_days <= 0:
        # Ended before the window, pin to the left edge
        return {
            "left_percent": 0.0,
            "width_percent": MIN_WIDTH_PERCENT,
            "has_missing_dates": has_missing_dates,
            "show_left_arrow": True,
            "show_right_arrow": False,
            "opacity": STUB_OPACITY,
        }
    if start_offset_days >= columns_count:
        # Starts after the window, pin to the right edge
        return {
            "left_percent": 100.0 - MIN_WIDTH_PERCENT,
            "width_percent": MIN_WIDTH_PERCENT,
            "has_missing_dates": has_missing_dates,
            "show_left_arrow": False,
            "show_right_arrow": True,
            "opacity": STUB_OPACITY,
        }

    visible_start = max(0, start_offset_days)
    visible_end = min(columns_count, end_offset_days)
    visible_duration = max(1, visible_end - visible_start)

    left_percent = _clamp(visible_start / columns_count * 100, 0.0, 100.0)
    width_percent = max(
        MIN_WIDTH_PERCENT,
        min(100.0 - left_percent, visible_duration / columns_count * 100),
    )
    if left_percent + width_percent > 100.0:
        # The minimum width would overflow the right edge
        left_percent = 100.0 - width_percent

    return {
        "left_percent": left_percent,
        "width_percent": width_percent,
        "has_missing_dates": has_missing_dates,
        "show_left_arrow": show_left_arrow,
        "show_right_arrow": show_right_arrow,
        "opacity": 1.0,
    }


def _clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))

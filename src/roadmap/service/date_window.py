# SPDX-License-Identifier: MIT

import pendulum
from loguru import logger

from roadmap.model.date_window import DateWindow
from roadmap.model.task import Task
from roadmap.model.zoom_level import ZoomLevel
from roadmap.service.task_dates import resolve_end, resolve_start
from roadmap.time import calendar_days_between

DAY_LEADING_PAD_DAYS = 7
DAY_TRAILING_PAD_DAYS = 14
DAY_MIN_TOTAL_DAYS = 30

WEEK_LEADING_PAD_DAYS = 14
WEEK_TRAILING_PAD_DAYS = 28
WEEK_MIN_TOTAL_DAYS = 56


def calculate_date_window(
    tasks: list[Task], zoom_level: ZoomLevel, now: pendulum.DateTime
) -> DateWindow:
    """
    Derive the visible date window for a set of tasks at a zoom level.

    The window always covers ``now`` and every date present on the tasks,
    padded according to the zoom level:

    - day: 7 days before, 14 days after, at least 30 days in total
    - week: back to the week start then 14 more days, 28 days after, at least 56 days
    - month: from the month before the earliest month to the end of the
      second month after the latest month
    - quarter: from the quarter before the earliest quarter to the end of the
      second quarter after the latest quarter

    Args:
        tasks: Tasks contributing dates to the window
        zoom_level: "day", "week", "month", or "quarter"
        now: The current instant, also providing the timezone

    Returns:
        The window start, end, and inclusive day count
    """
    earliest, latest = _date_bounds(tasks, now)

    if zoom_level == "day":
        start = earliest.subtract(days=DAY_LEADING_PAD_DAYS).start_of("day")
        end = latest.add(days=DAY_TRAILING_PAD_DAYS).end_of("day")
        start, end = _apply_minimum_span(start, end, DAY_MIN_TOTAL_DAYS)
    elif zoom_level == "week":
        # Align to the Sunday that starts the week
        days_since_week_start = earliest.isoweekday() % 7
        start = earliest.subtract(
            days=days_since_week_start + WEEK_LEADING_PAD_DAYS
        ).start_of("day")
        end = latest.add(days=WEEK_TRAILING_PAD_DAYS).end_of("day")
        start, end = _apply_minimum_span(start, end, WEEK_MIN_TOTAL_DAYS)
    elif zoom_level == "month":
        start = earliest.start_of("month").subtract(months=1)
        end = latest.start_of("month").add(months=2).end_of("month")
    elif zoom_level == "quarter":
        start = start_of_quarter(earliest).subtract(months=3)
        end = start_of_quarter(latest).add(months=8).end_of("month")
    else:
        raise ValueError(f"Unsupported zoom level: {zoom_level}")

    total_days = calendar_days_between(start, end) + 1
    logger.debug(
        "Window for zoom={} spans {} to {} ({} days)",
        zoom_level,
        start.format("YYYY-MM-DD"),
        end.format("YYYY-MM-DD"),
        total_days,
    )
    return {"start": start, "end": end, "total_days": total_days}


def start_of_quarter(datetime: pendulum.DateTime) -> pendulum.DateTime:
    first_month = ((datetime.month - 1) // 3) * 3 + 1
    return datetime.start_of("month").set(month=first_month)


def _date_bounds(
    tasks: list[Task], now: pendulum.DateTime
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    earliest = now
    latest = now

    for task in tasks:
        task_start = resolve_start(task, now)
        task_end = resolve_end(task, now)

        # A task with only an end date still anchors the earliest bound
        earliest_candidate = task_start if task_start is not None else task_end
        if earliest_candidate is not None and earliest_candidate < earliest:
            earliest = earliest_candidate

        for candidate in (task_start, task_end):
            if candidate is not None and candidate > latest:
                latest = candidate

    return earliest, latest


def _apply_minimum_span(
    start: pendulum.DateTime, end: pendulum.DateTime, minimum_days: int
) -> tuple[pendulum.DateTime, pendulum.DateTime]:
    # Only the end moves to satisfy the floor
    if calendar_days_between(start, end) + 1 < minimum_days:
        end = start.add(days=minimum_days - 1).end_of("day")
    return start, end

# SPDX-License-Identifier: MIT

import math

import pendulum
from loguru import logger

from roadmap.model.column import Column
from roadmap.model.date_window import DateWindow
from roadmap.model.zoom_level import ZoomLevel
from roadmap.service.date_window import start_of_quarter
from roadmap.time import calendar_days_between


def generate_columns(
    window: DateWindow, zoom_level: ZoomLevel, now: pendulum.DateTime
) -> list[Column]:
    """
    Discretize a date window into time-axis columns.

    Args:
        window: The visible date window
        zoom_level: "day", "week", "month", or "quarter"
        now: The current instant, used to flag the current column

    Returns:
        Ordered list of columns from the window start to its end
    """
    local_now = now.in_tz(window["start"].timezone or pendulum.UTC)

    if zoom_level == "day":
        columns = _generate_day_columns(window, local_now)
    elif zoom_level == "week":
        columns = _generate_week_columns(window, local_now)
    elif zoom_level == "month":
        columns = _generate_month_columns(window, local_now)
    elif zoom_level == "quarter":
        columns = _generate_quarter_columns(window, local_now)
    else:
        raise ValueError(f"Unsupported zoom level: {zoom_level}")

    logger.debug("Generated {} {} columns", len(columns), zoom_level)
    return columns


def columns_count_for_geometry(
    window: DateWindow, columns: list[Column], zoom_level: ZoomLevel
) -> int:
    """Day zoom lays bars out over its day columns, other zooms over the window's days."""
    if zoom_level == "day":
        return len(columns)
    return window["total_days"]


def week_of_year(datetime: pendulum.DateTime) -> int:
    jan_first = datetime.start_of("year")
    days_since_jan_first = calendar_days_between(jan_first, datetime)
    # Weekday counted from Sunday = 0
    jan_first_weekday = jan_first.isoweekday() % 7
    return math.ceil((days_since_jan_first + jan_first_weekday + 1) / 7)


def _generate_day_columns(window: DateWindow, now: pendulum.DateTime) -> list[Column]:
    columns: list[Column] = []
    first_day = window["start"].start_of("day")
    last_month = -1

    for i in range(window["total_days"]):
        date = first_day.add(days=i)
        is_first_of_month = date.month != last_month
        last_month = date.month
        columns.append(
            {
                "label": str(date.day),
                "sublabel": None,
                "date": date,
                "is_current": date.date() == now.date(),
                "month_label": date.format("MMM"),
                "is_first_of_month": is_first_of_month,
            }
        )

    return columns


def _generate_week_columns(window: DateWindow, now: pendulum.DateTime) -> list[Column]:
    columns: list[Column] = []
    number_of_weeks = math.ceil(window["total_days"] / 7)

    for i in range(number_of_weeks):
        date = window["start"].add(days=i * 7)
        columns.append(
            {
                "label": f"W{week_of_year(date)}",
                "sublabel": date.format("MMM D"),
                "date": date,
                "is_current": date <= now < date.add(days=7),
            }
        )

    return columns


def _generate_month_columns(
    window: DateWindow, now: pendulum.DateTime
) -> list[Column]:
    columns: list[Column] = []
    current = window["start"].start_of("month")
    last = window["end"].start_of("month")

    while current <= last:
        columns.append(
            {
                "label": current.format("MMMM"),
                "sublabel": str(current.year) if current.year != now.year else "",
                "date": current,
                "is_current": current.month == now.month and current.year == now.year,
            }
        )
        current = current.add(months=1)

    return columns


def _generate_quarter_columns(
    window: DateWindow, now: pendulum.DateTime
) -> list[Column]:
    columns: list[Column] = []
    current = start_of_quarter(window["start"])
    last = start_of_quarter(window["end"])
    now_quarter = (now.month - 1) // 3

    while current <= last:
        quarter_index = (current.month - 1) // 3
        columns.append(
            {
                "label": f"Q{quarter_index + 1}",
                "sublabel": str(current.year),
                "date": current,
                "is_current": quarter_index == now_quarter
                and current.year == now.year,
            }
        )
        current = current.add(months=3)

    return columns

# SPDX-License-Identifier: MIT

import pendulum
from loguru import logger

from roadmap.configuration import Configuration
from roadmap.model.entity_id import EntityId
from roadmap.model.geometry import TaskBarGeometry
from roadmap.model.layout import RoadmapLayout
from roadmap.model.task import Task
from roadmap.model.zoom_level import ZoomLevel
from roadmap.service.column import columns_count_for_geometry, generate_columns
from roadmap.service.date_window import calculate_date_window
from roadmap.service.geometry import map_task_geometry
from roadmap.service.today import calculate_today_marker
from roadmap.service.zoom import content_width


def build_roadmap_layout(
    tasks: list[Task],
    zoom_level: ZoomLevel,
    now: pendulum.DateTime,
    config: Configuration,
) -> RoadmapLayout:
    """
    Run the full layout pipeline for a task list at one zoom level.

    tasks + zoom -> window -> columns -> bar geometry per task and the
    today marker. Nothing is cached, every call recomputes from scratch.
    """
    window = calculate_date_window(tasks, zoom_level, now)
    columns = generate_columns(window, zoom_level, now)
    columns_count = columns_count_for_geometry(window, columns, zoom_level)

    bars: dict[EntityId, TaskBarGeometry] = {}
    for task in tasks:
        bars[task["id"]] = map_task_geometry(task, window, columns_count, now)

    logger.debug(
        "Laid out {} bars over {} columns at zoom={}", len(bars), len(columns), zoom_level
    )
    return {
        "zoom_level": zoom_level,
        "now": now,
        "window": window,
        "columns": columns,
        "columns_count": columns_count,
        "rendered_columns_count": len(columns),
        "bars": bars,
        "today": calculate_today_marker(window, now),
        "content_width": content_width(len(columns), zoom_level, config),
    }

# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from roadmap.model.column import Column
from roadmap.model.date_window import DateWindow
from roadmap.model.entity_id import EntityId
from roadmap.model.geometry import TaskBarGeometry, TodayMarker
from roadmap.model.zoom_level import ZoomLevel


class RoadmapLayout(TypedDict):
    zoom_level: ZoomLevel
    now: pendulum.DateTime
    window: DateWindow
    columns: list[Column]
    columns_count: int
    rendered_columns_count: int
    bars: dict[EntityId, TaskBarGeometry]
    today: TodayMarker
    content_width: float

# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class TaskInterval(TypedDict):
    start: pendulum.DateTime
    end: pendulum.DateTime
    has_missing_dates: bool


class TaskBarGeometry(TypedDict):
    left_percent: float
    width_percent: float
    has_missing_dates: bool
    show_left_arrow: bool
    show_right_arrow: bool
    opacity: float


class TodayMarker(TypedDict):
    left_percent: float
    is_visible: bool

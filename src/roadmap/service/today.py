# SPDX-License-Identifier: MIT

import pendulum

from roadmap.model.date_window import DateWindow
from roadmap.model.geometry import TodayMarker
from roadmap.time import fractional_days_between


def calculate_today_marker(window: DateWindow, now: pendulum.DateTime) -> TodayMarker:
    days_since_start = fractional_days_between(window["start"], now)
    return {
        "left_percent": days_since_start / window["total_days"] * 100,
        "is_visible": window["start"] <= now <= window["end"],
    }

# SPDX-License-Identifier: MIT

from typing import Literal, cast

ZoomLevel = Literal["day", "week", "month", "quarter"]

ZOOM_LEVELS: tuple[ZoomLevel, ...] = ("day", "week", "month", "quarter")


def parse_zoom_level(value: str) -> ZoomLevel:
    normalized = value.strip().lower()
    if normalized not in ZOOM_LEVELS:
        raise ValueError(
            f"Unsupported zoom level {value!r}, expected one of {', '.join(ZOOM_LEVELS)}"
        )
    return cast(ZoomLevel, normalized)

# SPDX-License-Identifier: MIT

from loguru import logger

from roadmap.configuration import Configuration
from roadmap.model.interaction import ScrollMetrics, ZoomTransition
from roadmap.model.zoom_level import ZoomLevel


def column_width_px(zoom_level: ZoomLevel, config: Configuration) -> int:
    """Day columns are narrow and fixed, every other zoom uses the wide column."""
    if zoom_level == "day":
        return config["day_column_width_px"]
    return config["column_width_px"]


def content_width(
    columns_count: int, zoom_level: ZoomLevel, config: Configuration
) -> float:
    return float(
        max(
            config["min_content_width_px"],
            columns_count * column_width_px(zoom_level, config),
        )
    )


def capture_scroll_fraction(metrics: ScrollMetrics) -> float:
    overflow = metrics["content_width"] - metrics["viewport_width"]
    if overflow <= 0:
        return 0.0
    return metrics["scroll_offset"] / overflow


def restore_scroll_offset(fraction: float, metrics: ScrollMetrics) -> float:
    overflow = metrics["content_width"] - metrics["viewport_width"]
    return max(0.0, fraction * overflow)


def begin_zoom_change(
    from_zoom: ZoomLevel, to_zoom: ZoomLevel, metrics: ScrollMetrics
) -> ZoomTransition:
    """
    Capture the viewer's relative scroll position before switching zoom.

    The returned transition is held until the view has been re-laid out at
    the new zoom level and is then passed to ``complete_zoom_change``.
    """
    return {
        "from_zoom": from_zoom,
        "to_zoom": to_zoom,
        "scroll_fraction": capture_scroll_fraction(metrics),
    }


def complete_zoom_change(
    transition: ZoomTransition, new_metrics: ScrollMetrics
) -> float:
    """Return the scroll offset that shows the same fraction of the new content."""
    new_offset = restore_scroll_offset(transition["scroll_fraction"], new_metrics)
    logger.debug(
        "Zoom {} -> {} keeps scroll fraction {:.3f} at offset {:.1f}",
        transition["from_zoom"],
        transition["to_zoom"],
        transition["scroll_fraction"],
        new_offset,
    )
    return new_offset

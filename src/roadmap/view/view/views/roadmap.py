# SPDX-License-Identifier: MIT

import math
from typing import Optional

from rich.console import Console, Group
from rich.padding import Padding
from rich.text import Text

from roadmap.color import (
    CURRENT_COLUMN_COLOR,
    MISSING_DATES_COLOR,
    TODAY_MARKER_COLOR,
    get_task_color,
)
from roadmap.model.geometry import TaskBarGeometry
from roadmap.model.layout import RoadmapLayout
from roadmap.model.task import Task
from roadmap.query.group import group_tasks
from roadmap.service.progress import epic_progress, task_progress
from roadmap.time import calendar_days_between, datetime_to_date_str
from roadmap.view.view.views.header import header

MIN_TIMELINE_WIDTH = 10

Cell = tuple[str, str]


def roadmap_view(
    layout: RoadmapLayout,
    tasks: list[Task],
    report_name: str = "Roadmap",
    left_column_width: int = 40,
    timeline_width: Optional[int] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render a computed roadmap layout as a terminal timeline.

    Epics are listed first with their children indented beneath them,
    followed by standalone tasks. Each bar is drawn from the layout's
    percentage geometry scaled to the available terminal width.

    Args:
        layout: The layout computed for ``tasks``
        tasks: Tasks to list, in display order
        report_name: The name shown in the header
        left_column_width: Width of the left column for task names
        timeline_width: Character width of the timeline, defaults to the
            terminal width left over after the name column
        console: Console to print to, defaults to a new one
    """
    if console is None:
        console = Console()

    window = layout["window"]
    header(
        report_name,
        f"{layout['zoom_level']} | {datetime_to_date_str(window['start'])} to "
        f"{datetime_to_date_str(window['end'])}",
    )

    if not tasks:
        console.print("\n[dim]No tasks to display[/dim]\n")
        return

    if timeline_width is None:
        timeline_width = console.width - left_column_width
    timeline_width = max(MIN_TIMELINE_WIDTH, timeline_width)

    column_starts = _column_starts(layout, timeline_width)
    today_cell = _today_cell(layout, timeline_width)

    chart_elements: list[Text] = []
    if layout["zoom_level"] == "day":
        chart_elements.append(
            _build_month_row(layout, column_starts, timeline_width, left_column_width)
        )
    chart_elements.append(
        _build_label_row(layout, column_starts, timeline_width, left_column_width)
    )
    if any(column["sublabel"] for column in layout["columns"]):
        chart_elements.append(
            _build_sublabel_row(
                layout, column_starts, timeline_width, left_column_width
            )
        )
    chart_elements.append(_build_today_row(today_cell, timeline_width, left_column_width))
    chart_elements.append(Text("─" * (left_column_width + timeline_width), style="dim"))

    groups = group_tasks(tasks)
    for epic in groups["epics"]:
        chart_elements.append(
            _build_task_row(
                epic,
                layout["bars"][epic["id"]],
                epic_progress(epic["id"], tasks, groups["children_map"]),
                today_cell,
                timeline_width,
                left_column_width,
                indent=0,
            )
        )
        for child in groups["children_map"].get(epic["id"], []):
            chart_elements.append(
                _build_task_row(
                    child,
                    layout["bars"][child["id"]],
                    task_progress(child),
                    today_cell,
                    timeline_width,
                    left_column_width,
                    indent=2,
                )
            )

    # Children whose parent was filtered out are still shown
    epic_ids = {epic["id"] for epic in groups["epics"]}
    orphans = [task for task in groups["others"] if task.get("parent_id") not in epic_ids]
    for task in groups["standalone"] + orphans:
        chart_elements.append(
            _build_task_row(
                task,
                layout["bars"][task["id"]],
                task_progress(task),
                today_cell,
                timeline_width,
                left_column_width,
                indent=0,
            )
        )

    console.print(Padding(Group(*chart_elements), (1, 0, 1, 0)))


def _percent_to_cell(percent: float, timeline_width: int) -> int:
    return max(0, min(timeline_width, round(percent / 100 * timeline_width)))


def _column_starts(layout: RoadmapLayout, timeline_width: int) -> list[int]:
    """First timeline cell of every column."""
    window_start = layout["window"]["start"]
    starts: list[int] = []
    for column in layout["columns"]:
        offset_days = max(0, calendar_days_between(window_start, column["date"]))
        starts.append(
            _percent_to_cell(offset_days / layout["columns_count"] * 100, timeline_width)
        )
    return starts


def _today_cell(layout: RoadmapLayout, timeline_width: int) -> Optional[int]:
    today = layout["today"]
    if not today["is_visible"]:
        return None
    return min(timeline_width - 1, math.floor(today["left_percent"] / 100 * timeline_width))


def _column_segments(
    column_starts: list[int], timeline_width: int
) -> list[tuple[int, int]]:
    ends = column_starts[1:] + [timeline_width]
    return list(zip(column_starts, ends))


def _fit(text: str, width: int) -> str:
    if width <= 0:
        return ""
    if len(text) >= width:
        # Leave a gap so neighbouring labels stay readable
        return text[: max(0, width - 1)].ljust(width)
    return text.ljust(width)


def _build_month_row(
    layout: RoadmapLayout,
    column_starts: list[int],
    timeline_width: int,
    left_column_width: int,
) -> Text:
    row = Text(" " * left_column_width)
    cells = [" "] * timeline_width
    for column, start in zip(layout["columns"], column_starts):
        if not column.get("is_first_of_month"):
            continue
        label = f"{column.get('month_label', '')} {column['date'].year}"
        for i, char in enumerate(label):
            if start + i >= timeline_width:
                break
            cells[start + i] = char
    row.append("".join(cells), style="bold")
    return row


def _build_label_row(
    layout: RoadmapLayout,
    column_starts: list[int],
    timeline_width: int,
    left_column_width: int,
) -> Text:
    row = Text(" " * left_column_width)
    for column, (start, end) in zip(
        layout["columns"], _column_segments(column_starts, timeline_width)
    ):
        style = CURRENT_COLUMN_COLOR if column["is_current"] else ""
        row.append(_fit(column["label"], end - start), style=style)
    return row


def _build_sublabel_row(
    layout: RoadmapLayout,
    column_starts: list[int],
    timeline_width: int,
    left_column_width: int,
) -> Text:
    row = Text(" " * left_column_width)
    for column, (start, end) in zip(
        layout["columns"], _column_segments(column_starts, timeline_width)
    ):
        row.append(_fit(column["sublabel"] or "", end - start), style="dim")
    return row


def _build_today_row(
    today_cell: Optional[int], timeline_width: int, left_column_width: int
) -> Text:
    row = Text(" " * left_column_width)
    if today_cell is None:
        row.append(" " * timeline_width)
        return row
    row.append(" " * today_cell)
    row.append("▼", style=TODAY_MARKER_COLOR)
    row.append(" " * (timeline_width - today_cell - 1))
    return row


def _format_task_left_column(task: Task, left_column_width: int, indent: int) -> str:
    key = task.get("key") or task["id"]
    title = task.get("title") or "[no title]"
    left_col = f"{' ' * indent}{key} {title}"
    if len(left_col) > left_column_width - 1:
        return left_col[: left_column_width - 4] + "... "
    return left_col.ljust(left_column_width)


def _build_task_row(
    task: Task,
    geometry: TaskBarGeometry,
    progress: int,
    today_cell: Optional[int],
    timeline_width: int,
    left_column_width: int,
    indent: int,
) -> Text:
    """
    Build a row for a single task with its name and bar.

    The completed share of the bar is drawn solid and the rest shaded.
    Stubs for tasks outside the window are dimmed, and tasks whose dates
    had to be synthesized get a marker right after the bar.
    """
    color = get_task_color(task)
    style = color if geometry["opacity"] >= 1.0 else f"dim {color}"

    row = Text()
    row.append(_format_task_left_column(task, left_column_width, indent), style=color)

    bar_start = _percent_to_cell(geometry["left_percent"], timeline_width)
    bar_end = _percent_to_cell(
        geometry["left_percent"] + geometry["width_percent"], timeline_width
    )
    # Every bar occupies at least one cell
    if bar_start >= timeline_width:
        bar_start = timeline_width - 1
    bar_end = max(bar_end, bar_start + 1)
    filled_end = bar_start + round((bar_end - bar_start) * progress / 100)

    cells: list[Cell] = [(" ", "")] * timeline_width
    if today_cell is not None:
        cells[today_cell] = ("│", TODAY_MARKER_COLOR)

    for i in range(bar_start, bar_end):
        cells[i] = ("█" if i < filled_end else "▒", style)
    if geometry["show_left_arrow"]:
        cells[bar_start] = ("◀", style)
    if geometry["show_right_arrow"]:
        cells[bar_end - 1] = ("▶", style)
    if geometry["has_missing_dates"] and bar_end < timeline_width:
        cells[bar_end] = ("?", MISSING_DATES_COLOR)

    for char, cell_style in cells:
        row.append(char, style=cell_style)
    return row

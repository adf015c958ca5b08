# SPDX-License-Identifier: MIT

from roadmap.model.task import Task

TODAY_MARKER_COLOR = "bright_red"
CURRENT_COLUMN_COLOR = "bold dark_orange"
MISSING_DATES_COLOR = "yellow"
DEFAULT_TASK_COLOR = "blue"

TYPE_COLORS = {
    "epic": "purple",
    "story": "green",
    "task": "blue",
    "bug": "red",
}


def get_task_color(task: Task) -> str:
    """Explicit task colors win over the color of the task's type."""
    color = task.get("color")
    if color:
        return color
    return TYPE_COLORS.get(task.get("type") or "", DEFAULT_TASK_COLOR)

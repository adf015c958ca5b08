# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from roadmap.model.interaction import ScrollMetrics
from roadmap.model.zoom_level import ZoomLevel
from roadmap.query.filter import filter_tasks
from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.repository.task import TASK_REPO
from roadmap.service.drag import end_drag, start_drag
from roadmap.service.layout import build_roadmap_layout
from roadmap.service.reschedule import RescheduleCoordinator
from roadmap.service.zoom import begin_zoom_change, complete_zoom_change
from roadmap.terminal.parse import parse_csv, parse_datetime, parse_zoom
from roadmap.time import now_local
from roadmap.view.view.views.roadmap import roadmap_view

console = Console()

TasksFileArgument = Annotated[
    Optional[Path],
    typer.Argument(
        help="YAML task file, defaults to tasks_path from the configuration",
        show_default=False,
    ),
]
ZoomOption = Annotated[
    Optional[str],
    typer.Option("--zoom", "-z", help="Zoom level: day, week, month, or quarter"),
]
NowOption = Annotated[
    Optional[pendulum.DateTime],
    typer.Option(
        "--now",
        "-n",
        parser=parse_datetime,
        help="Treat this as the current time (YYYY-MM-DD, now, today, or day offset like 1, -1)",
    ),
]


def _load_tasks(tasks_file: Optional[Path]) -> None:
    if tasks_file is None:
        tasks_path = CONFIGURATION_REPO.get_config().get("tasks_path")
        if tasks_path is None:
            raise typer.BadParameter(
                "No task file given and no tasks_path configured", param_hint="TASKS_FILE"
            )
        tasks_file = Path(tasks_path).expanduser()
    if not tasks_file.is_file():
        raise typer.BadParameter(
            f"Task file {tasks_file} does not exist", param_hint="TASKS_FILE"
        )
    try:
        TASK_REPO.load(tasks_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="TASKS_FILE")


def _resolve_zoom(zoom_param: Optional[str]) -> ZoomLevel:
    zoom_level = parse_zoom(zoom_param)
    if zoom_level is not None:
        return zoom_level
    default_zoom = parse_zoom(CONFIGURATION_REPO.get_config()["default_zoom_level"])
    if default_zoom is None:
        raise typer.BadParameter("No zoom level configured", param_hint="--zoom")
    return default_zoom


def view(
    tasks_file: TasksFileArgument = None,
    zoom: ZoomOption = None,
    now: NowOption = None,
    search: Annotated[
        Optional[str],
        typer.Option("--search", "-s", help="Only show tasks whose title or key contains this text"),
    ] = None,
    task_type: Annotated[
        Optional[list[str]],
        typer.Option("--type", "-t", help="Only show tasks of these types (repeat or comma-separate)"),
    ] = None,
    status: Annotated[
        Optional[list[str]],
        typer.Option(
            "--status",
            help="Only show tasks with these statuses, e.g. todo, in_progress, done",
        ),
    ] = None,
    assignee: Annotated[
        Optional[list[str]],
        typer.Option("--assignee", "-a", help="Only show tasks assigned to these people"),
    ] = None,
    left_width: Annotated[
        Optional[int],
        typer.Option("--left-width", "-lw", help="Width of the task name column"),
    ] = None,
) -> None:
    """Display the tasks of a task file on a roadmap timeline."""
    zoom_level = _resolve_zoom(zoom)
    _load_tasks(tasks_file)
    config = CONFIGURATION_REPO.get_config()
    current_time = now if now is not None else now_local()

    tasks = filter_tasks(
        TASK_REPO.get_all_tasks(),
        query=search,
        types=parse_csv(task_type),
        statuses=parse_csv(status),
        assignees=parse_csv(assignee),
    )
    layout = build_roadmap_layout(tasks, zoom_level, current_time, config)
    roadmap_view(
        layout,
        tasks,
        report_name="Roadmap",
        left_column_width=left_width if left_width is not None else config["left_column_width"],
    )


def zoom(
    from_zoom: Annotated[
        str, typer.Option("--from", "-f", help="Zoom level before the change")
    ],
    to_zoom: Annotated[
        str, typer.Option("--to", "-t", help="Zoom level after the change")
    ],
    tasks_file: TasksFileArgument = None,
    scroll_offset: Annotated[
        float, typer.Option("--scroll-offset", "-o", help="Horizontal scroll offset in px")
    ] = 0.0,
    viewport_width: Annotated[
        float, typer.Option("--viewport-width", "-w", help="Visible timeline width in px")
    ] = 1024.0,
    now: NowOption = None,
) -> None:
    """Print the scroll offset that keeps the same relative position after a zoom change."""
    from_level = _resolve_zoom(from_zoom)
    to_level = _resolve_zoom(to_zoom)
    _load_tasks(tasks_file)
    config = CONFIGURATION_REPO.get_config()
    current_time = now if now is not None else now_local()
    tasks = TASK_REPO.get_all_tasks()

    before = build_roadmap_layout(tasks, from_level, current_time, config)
    metrics: ScrollMetrics = {
        "scroll_offset": scroll_offset,
        "content_width": before["content_width"],
        "viewport_width": viewport_width,
    }
    transition = begin_zoom_change(from_level, to_level, metrics)

    after = build_roadmap_layout(tasks, to_level, current_time, config)
    new_offset = complete_zoom_change(
        transition,
        {
            "scroll_offset": 0.0,
            "content_width": after["content_width"],
            "viewport_width": viewport_width,
        },
    )

    console.print(
        f"{from_level} ({before['content_width']:.0f}px) -> "
        f"{to_level} ({after['content_width']:.0f}px)"
    )
    console.print(f"scroll fraction: {transition['scroll_fraction']:.4f}")
    console.print(f"scroll offset: {new_offset:.1f}")


def reschedule(
    tasks_file: Annotated[Path, typer.Argument(help="YAML task file")],
    task_id: Annotated[str, typer.Argument(help="Id of the task to move")],
    delta_x: Annotated[
        float,
        typer.Option("--delta-x", "-x", help="Horizontal drag distance in px, negative moves earlier"),
    ] = 0.0,
    zoom: ZoomOption = None,
    now: NowOption = None,
) -> None:
    """Move a task by dragging its bar DELTA_X pixels on the timeline."""
    zoom_level = _resolve_zoom(zoom)
    _load_tasks(tasks_file)
    config = CONFIGURATION_REPO.get_config()
    current_time = now if now is not None else now_local()

    tasks = TASK_REPO.get_all_tasks()
    try:
        task = TASK_REPO.get_task(task_id)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="TASK_ID")

    layout = build_roadmap_layout(tasks, zoom_level, current_time, config)
    drag = start_drag(task_id, 0.0)
    request = end_drag(
        drag,
        delta_x,
        task,
        layout["window"],
        layout["rendered_columns_count"],
        zoom_level,
        config,
        current_time,
    )
    if request is None:
        console.print("[dim]Task not moved[/dim]")
        return

    coordinator = RescheduleCoordinator(
        update=TASK_REPO.update_task_dates,
        resync=TASK_REPO.reload,
        notify=lambda message: console.print(f"[red]{message}[/red]"),
    )
    if coordinator.commit(request):
        TASK_REPO.flush()
        console.print(
            f"Moved {task_id} to {request['start_date']} .. {request['due_date']}"
        )
    else:
        raise typer.Exit(code=1)

# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from roadmap import configuration
from roadmap.configuration import Configuration
from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.terminal.custom_typer import AliasedTyperGroup
from roadmap.terminal.parse import parse_zoom

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _configuration_table(config: Configuration, title: Optional[str] = None) -> Table:
    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("default_zoom_level", config["default_zoom_level"])
    table.add_row("day_column_width_px", str(config["day_column_width_px"]))
    table.add_row("column_width_px", str(config["column_width_px"]))
    table.add_row("min_content_width_px", str(config["min_content_width_px"]))
    table.add_row("left_column_width", str(config["left_column_width"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("tasks_path", str(config.get("tasks_path")))
    return table


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table(CONFIGURATION_REPO.get_config()))
    console.print()
    console.print(f"Config file: {configuration.APP_CONFIG_PATH}")


@app.command("set, s")
def set(
    default_zoom_level: Annotated[
        Optional[str],
        typer.Option("--default-zoom-level", help="Zoom level used when --zoom is not given"),
    ] = None,
    day_column_width_px: Annotated[
        Optional[int],
        typer.Option("--day-column-width-px", min=1, help="Width of a day column in px"),
    ] = None,
    column_width_px: Annotated[
        Optional[int],
        typer.Option(
            "--column-width-px", min=1, help="Width of week, month, and quarter columns in px"
        ),
    ] = None,
    min_content_width_px: Annotated[
        Optional[int],
        typer.Option("--min-content-width-px", min=0, help="Minimum timeline width in px"),
    ] = None,
    left_column_width: Annotated[
        Optional[int],
        typer.Option("--left-column-width", min=1, help="Width of the task name column"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="Log level written to stderr"),
    ] = None,
    tasks_path: Annotated[
        Optional[str],
        typer.Option("--tasks-path", help="Task file used when none is given"),
    ] = None,
    remove_tasks_path: Annotated[
        bool, typer.Option("--remove-tasks-path", help="Forget the default task file")
    ] = False,
) -> None:
    """
    Update configuration settings.
    """
    if default_zoom_level is not None:
        default_zoom_level = parse_zoom(default_zoom_level)
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            raise typer.BadParameter(
                f"Expected one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
            )

    CONFIGURATION_REPO.update_config(
        default_zoom_level=default_zoom_level,
        day_column_width_px=day_column_width_px,
        column_width_px=column_width_px,
        min_content_width_px=min_content_width_px,
        left_column_width=left_column_width,
        log_level=log_level,
        tasks_path=tasks_path,
        remove_tasks_path=remove_tasks_path,
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(
        _configuration_table(CONFIGURATION_REPO.get_config(), title="Updated Configuration")
    )

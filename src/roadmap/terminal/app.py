# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from roadmap.terminal import configuration
from roadmap.terminal.custom_typer import OrderedAliasedTyperGroup
from roadmap.terminal.view import reschedule, view, zoom
from roadmap.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Roadmap - Task timelines in the CLI",
    no_args_is_help=True,
)
app.command(name="view, v")(view)
app.command(name="zoom, z")(zoom)
app.command(name="reschedule, r")(reschedule)
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output",
        ),
    ] = False,
) -> None:
    """
    Roadmap - Task timelines in the CLI

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()

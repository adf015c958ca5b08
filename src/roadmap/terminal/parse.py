# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from roadmap.model.zoom_level import ZoomLevel, parse_zoom_level


def parse_datetime(datetime_param: Optional[str | int]) -> Optional[pendulum.DateTime]:
    """
    Parse the ``--now`` style options into a local pendulum.DateTime.

    Accepts YYYY-MM-DD (with an optional time component), ``now``/``n``,
    ``today``/``t``, or a day offset from today such as ``1`` or ``-7``.
    """
    if datetime_param is None:
        return None

    datetime = str(datetime_param).strip()

    if re.match(r"\d{4}-\d{2}-\d{2}", datetime):
        try:
            parsed = pendulum.parse(datetime, tz="local")
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date {datetime!r}: {e}")
        if not isinstance(parsed, pendulum.DateTime):
            raise typer.BadParameter(f"Invalid date {datetime!r}")
        return parsed.in_tz("local")

    if re.match(r"^-?\d+$", datetime):
        return pendulum.today("local").add(days=int(datetime))

    if datetime == "now" or datetime == "n":
        return pendulum.now("local")
    if datetime == "today" or datetime == "t":
        return pendulum.today("local")
    raise typer.BadParameter("Incorrect datetime format")


def parse_zoom(zoom_param: Optional[str]) -> Optional[ZoomLevel]:
    if zoom_param is None:
        return None
    try:
        return parse_zoom_level(zoom_param)
    except ValueError as e:
        raise typer.BadParameter(str(e))


def parse_csv(param: Optional[list[str]]) -> Optional[list[str]]:
    """Flatten repeated and comma-separated option values into one list."""
    if not param:
        return None
    values: list[str] = []
    for item in param:
        values.extend(part.strip() for part in item.split(",") if part.strip())
    return values or None

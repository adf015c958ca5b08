# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import NotRequired, Optional, TypedDict

import platformdirs

APP_NAME = "roadmap"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    default_zoom_level: str
    day_column_width_px: int
    column_width_px: int
    min_content_width_px: int
    left_column_width: int
    log_level: str
    tasks_path: NotRequired[Optional[str]]


def get_default_configuration() -> Configuration:
    return {
        "default_zoom_level": "month",
        "day_column_width_px": 40,
        "column_width_px": 120,
        "min_content_width_px": 800,
        "left_column_width": 40,
        "log_level": "WARNING",
        "tasks_path": None,
    }

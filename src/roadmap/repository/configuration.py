# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from roadmap import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None
        self.is_dirty = False

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()

        if not configuration.APP_CONFIG_PATH.is_file():
            self._config = defaults
            return

        raw_config = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if raw_config is None:
            self._config = defaults
            return
        if not isinstance(raw_config, dict):
            raise ValueError(
                f"Configuration at {configuration.APP_CONFIG_PATH} must be a mapping"
            )

        # Fill in keys added after the file was first written
        for key, value in defaults.items():
            if key not in raw_config:
                raw_config[key] = value
        self._config = cast(configuration.Configuration, raw_config)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

    def flush(self) -> bool:
        if self._config is not None and self.is_dirty:
            self.__save_data(self._config)
            self.is_dirty = False
            return True
        return False

    def reset(self) -> None:
        self._config = None
        self.is_dirty = False

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        default_zoom_level: Optional[str] = None,
        day_column_width_px: Optional[int] = None,
        column_width_px: Optional[int] = None,
        min_content_width_px: Optional[int] = None,
        left_column_width: Optional[int] = None,
        log_level: Optional[str] = None,
        tasks_path: Optional[str] = None,
        remove_tasks_path: bool = False,
    ) -> None:
        self.is_dirty = True

        if default_zoom_level is not None:
            self.config["default_zoom_level"] = default_zoom_level
        if day_column_width_px is not None:
            self.config["day_column_width_px"] = day_column_width_px
        if column_width_px is not None:
            self.config["column_width_px"] = column_width_px
        if min_content_width_px is not None:
            self.config["min_content_width_px"] = min_content_width_px
        if left_column_width is not None:
            self.config["left_column_width"] = left_column_width
        if log_level is not None:
            self.config["log_level"] = log_level
        if tasks_path is not None:
            self.config["tasks_path"] = tasks_path
        if remove_tasks_path:
            self.config["tasks_path"] = None


CONFIGURATION_REPO = ConfigurationRepository()

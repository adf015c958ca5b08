# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from loguru import logger
from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from roadmap.model.entity_id import EntityId
from roadmap.model.interaction import RescheduleRequest
from roadmap.model.task import Task


class TaskRepository:
    """
    In-memory task store backed by a single YAML file.

    The file holds either a mapping with a ``tasks`` list or a bare list of
    tasks. Changes are kept in memory until ``flush`` writes them back.
    """

    def __init__(self) -> None:
        self._path: Optional[Path] = None
        self._tasks: Optional[list[Task]] = None
        self._wrapped = True
        self.is_dirty = False

    @property
    def path(self) -> Path:
        if self._path is None:
            raise ValueError("No task file has been loaded")
        return self._path

    @property
    def tasks(self) -> list[Task]:
        if self._tasks is None:
            self.__load_data()
        if self._tasks is None:
            raise ValueError()
        return self._tasks

    def load(self, path: Path) -> None:
        self._path = path
        self._tasks = None
        self.is_dirty = False
        self.__load_data()

    def reload(self) -> None:
        """Discard in-memory changes and read the file again."""
        self._tasks = None
        self.is_dirty = False
        self.__load_data()

    def __load_data(self) -> None:
        raw_data = load(self.path.read_text(), Loader=Loader)
        if raw_data is None:
            raw_tasks: list[Any] = []
        elif isinstance(raw_data, list):
            self._wrapped = False
            raw_tasks = raw_data
        elif isinstance(raw_data, dict):
            self._wrapped = True
            raw_tasks = raw_data.get("tasks") or []
        else:
            raise ValueError(f"Task file {self.path} must hold a list or a mapping")

        tasks: list[Task] = []
        for raw_task in raw_tasks:
            if not isinstance(raw_task, dict) or raw_task.get("id") is None:
                logger.warning("Skipping task without an id in {}", self.path)
                continue
            raw_task["id"] = str(raw_task["id"])
            if raw_task.get("parent_id") is not None:
                raw_task["parent_id"] = str(raw_task["parent_id"])
            tasks.append(cast(Task, raw_task))

        logger.debug("Loaded {} tasks from {}", len(tasks), self.path)
        self._tasks = tasks

    def __save_data(self) -> None:
        tasks = [dict(task) for task in self.tasks]
        data: Any = {"tasks": tasks} if self._wrapped else tasks
        self.path.write_text(dump(data, Dumper=Dumper, sort_keys=False))

    def flush(self) -> bool:
        if self._tasks is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self.tasks)

    def get_task(self, id: EntityId) -> Task:
        for task in self.tasks:
            if task["id"] == id:
                return deepcopy(task)
        raise ValueError(f"No task found with id {id}")

    def update_task_dates(self, request: RescheduleRequest) -> None:
        for task in self.tasks:
            if task["id"] == request["task_id"]:
                task["start_date"] = request["start_date"]
                task["due_date"] = request["due_date"]
                self.is_dirty = True
                return
        raise ValueError(f"No task found with id {request['task_id']}")


TASK_REPO = TaskRepository()

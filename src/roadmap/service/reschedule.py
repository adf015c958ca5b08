# SPDX-License-Identifier: MIT

import threading
from copy import deepcopy
from typing import Callable, Optional

from loguru import logger

from roadmap.model.entity_id import EntityId
from roadmap.model.interaction import RescheduleRequest
from roadmap.model.task import Task


def apply_reschedule(tasks: list[Task], request: RescheduleRequest) -> list[Task]:
    """Return a copy of ``tasks`` with the requested dates applied to the matching task."""
    updated: list[Task] = []
    for task in tasks:
        task_copy = deepcopy(task)
        if task_copy["id"] == request["task_id"]:
            task_copy["start_date"] = request["start_date"]
            task_copy["due_date"] = request["due_date"]
        updated.append(task_copy)
    return updated


class RescheduleCoordinator:
    """
    Commits reschedule requests to an update callable.

    Commits for the same task run one at a time. Each commit takes a
    sequence number when it is submitted; if a newer commit for the same
    task has been submitted by the time it acquires the task's lock, it is
    dropped so the latest drag wins.

    When the update fails, the authoritative task list is reloaded through
    ``resync`` instead of patching local state.
    """

    def __init__(
        self,
        update: Callable[[RescheduleRequest], None],
        resync: Callable[[], None],
        notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._update = update
        self._resync = resync
        self._notify = notify
        self._guard = threading.Lock()
        self._locks: dict[EntityId, threading.Lock] = {}
        self._latest_sequence: dict[EntityId, int] = {}
        self._pending: dict[EntityId, int] = {}

    def commit(self, request: RescheduleRequest) -> bool:
        task_id = request["task_id"]
        with self._guard:
            sequence = self._latest_sequence.get(task_id, 0) + 1
            self._latest_sequence[task_id] = sequence
            self._pending[task_id] = self._pending.get(task_id, 0) + 1
            task_lock = self._locks.setdefault(task_id, threading.Lock())

        try:
            with task_lock:
                return self._commit_latest(request, sequence)
        finally:
            self._release(task_id)

    def pending_task_ids(self) -> set[EntityId]:
        with self._guard:
            return set(self._pending)

    def _release(self, task_id: EntityId) -> None:
        # Forget the task once no commit for it is running or waiting
        with self._guard:
            self._pending[task_id] -= 1
            if self._pending[task_id] == 0:
                del self._pending[task_id]
                del self._locks[task_id]
                del self._latest_sequence[task_id]

    def _commit_latest(self, request: RescheduleRequest, sequence: int) -> bool:
        task_id = request["task_id"]
        with self._guard:
            latest = self._latest_sequence[task_id]
        if sequence != latest:
            logger.info(
                "Dropping superseded reschedule of task {} (#{})", task_id, sequence
            )
            return False

        try:
            self._update(request)
        except Exception as e:
            logger.warning("Failed to reschedule task {}: {}", task_id, e)
            if self._notify is not None:
                self._notify(f"Failed to update dates for task {task_id}")
            self._resync()
            return False

        logger.info(
            "Rescheduled task {} to {} .. {}",
            task_id,
            request["start_date"],
            request["due_date"],
        )
        return True

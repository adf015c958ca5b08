# SPDX-License-Identifier: MIT

import atexit

from roadmap.repository.configuration import CONFIGURATION_REPO
from roadmap.repository.task import TASK_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    TASK_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)

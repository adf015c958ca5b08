# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

from roadmap.model.geometry import TaskInterval
from roadmap.model.task import Task
from roadmap.time import datetime_from_value_optional

DEFAULT_DURATION_DAYS = 7


def _timezone(now: pendulum.DateTime) -> Union[pendulum.Timezone, pendulum.FixedTimezone]:
    return now.timezone or pendulum.UTC


def resolve_start(task: Task, now: pendulum.DateTime) -> Optional[pendulum.DateTime]:
    """Return the task's start date, preferring ``start_date`` over ``start_date_rfc3339``."""
    tz = _timezone(now)
    start = datetime_from_value_optional(task.get("start_date"), tz)
    if start is None:
        start = datetime_from_value_optional(task.get("start_date_rfc3339"), tz)
    return start


def resolve_end(task: Task, now: pendulum.DateTime) -> Optional[pendulum.DateTime]:
    """Return the task's end date, preferring ``due_date`` over ``due_date_rfc3339``."""
    tz = _timezone(now)
    end = datetime_from_value_optional(task.get("due_date"), tz)
    if end is None:
        end = datetime_from_value_optional(task.get("due_date_rfc3339"), tz)
    return end


def resolve_task_interval(task: Task, now: pendulum.DateTime) -> TaskInterval:
    """
    Resolve the interval a task bar covers, synthesizing missing bounds.

    - start and end present: used as-is
    - start only: end is synthesized 7 days after the start
    - end only: start falls back to ``now`` and the task is flagged
    - neither: ``now`` to ``now + 7 days`` and the task is flagged

    Args:
        task: The task whose dates should be resolved
        now: The current instant, also providing the timezone for parsing

    Returns:
        The effective interval and whether dates were missing
    """
    start = resolve_start(task, now)
    end = resolve_end(task, now)

    if start is not None and end is not None:
        return {"start": start, "end": end, "has_missing_dates": False}
    if start is not None:
        return {
            "start": start,
            "end": start.add(days=DEFAULT_DURATION_DAYS),
            "has_missing_dates": False,
        }
    if end is not None:
        return {"start": now, "end": end, "has_missing_dates": True}
    return {
        "start": now,
        "end": now.add(days=DEFAULT_DURATION_DAYS),
        "has_missing_dates": True,
    }

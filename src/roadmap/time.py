# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Union

import pendulum
from loguru import logger

DateValue = Union[str, datetime.date, datetime.datetime]


def now_local() -> pendulum.DateTime:
    return pendulum.now("local")


def python_to_pendulum(
    python_value: Union[datetime.date, datetime.datetime],
    tz: Union[str, pendulum.Timezone, pendulum.FixedTimezone],
) -> pendulum.DateTime:
    if isinstance(python_value, datetime.datetime):
        return pendulum.instance(python_value, tz=tz).in_tz(tz)
    return pendulum.datetime(
        python_value.year, python_value.month, python_value.day, tz=tz
    )


def datetime_from_value_optional(
    value: Optional[DateValue],
    tz: Union[str, pendulum.Timezone, pendulum.FixedTimezone],
) -> Optional[pendulum.DateTime]:
    """
    Parse a task date value into a pendulum.DateTime in the given timezone.

    Date-only strings resolve to midnight in ``tz``. Values carrying their own
    offset are converted into ``tz``. Anything that cannot be read as a
    datetime is treated as absent and returns None.
    """
    if value is None:
        return None
    if isinstance(value, (datetime.date, datetime.datetime)):
        return python_to_pendulum(value, tz)

    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = pendulum.parse(text, tz=tz)
    except (ValueError, TypeError) as e:
        logger.debug("Ignoring unparseable date {!r}: {}", text, e)
        return None
    if not isinstance(parsed, pendulum.DateTime):
        logger.debug("Ignoring non-datetime value {!r}", text)
        return None
    return parsed.in_tz(tz)


def calendar_days_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Signed number of calendar days from ``start``'s date to ``end``'s date."""
    start_date = datetime.date(start.year, start.month, start.day)
    end_date = datetime.date(end.year, end.month, end.day)
    return (end_date - start_date).days


def fractional_days_between(
    start: pendulum.DateTime, end: pendulum.DateTime
) -> float:
    return (end.timestamp() - start.timestamp()) / 86400


def datetime_to_date_str(datetime: pendulum.DateTime) -> str:
    """Convert a pendulum.DateTime to a date string in 'YYYY-MM-DD' format."""
    return datetime.format("YYYY-MM-DD")



# SPDX-License-Identifier: MIT

from typing import NotRequired, Optional, TypedDict

import pendulum


class Column(TypedDict):
    label: str
    sublabel: Optional[str]
    date: pendulum.DateTime
    is_current: bool
    # day zoom only, drives the grouped month header row
    month_label: NotRequired[str]
    is_first_of_month: NotRequired[bool]

# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict

import pendulum

from almanac.model.almanac import AlmanacFact
from almanac.model.plan import PlanEntry


class DayCell(TypedDict):
    date: pendulum.Date
    fact: AlmanacFact
    plan: Optional[PlanEntry]


# A Sunday-first week; None pads days outside the month
Week: TypeAlias = list[Optional[DayCell]]

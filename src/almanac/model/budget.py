# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class BudgetEntry(TypedDict):
    id: int
    item: str
    amount: float
    date: pendulum.Date

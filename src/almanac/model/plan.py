# SPDX-License-Identifier: MIT

from typing import TypeAlias, TypedDict


class PlanEntry(TypedDict):
    note: str
    time: str
    is_leave: bool


# Plan entries keyed by 'YYYY-MM-DD'
Plans: TypeAlias = dict[str, PlanEntry]

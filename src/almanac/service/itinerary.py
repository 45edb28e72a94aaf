# SPDX-License-Identifier: MIT

from typing import Mapping, Optional

import pendulum

from almanac.model.itinerary import DayCell, Week
from almanac.model.plan import PlanEntry
from almanac.service.almanac import AlmanacEngine
from almanac.time import date_to_iso_str


def sorted_plans(plan_entries: Mapping[str, PlanEntry]) -> list[tuple[str, PlanEntry]]:
    """Plan entries in ascending date order."""
    return sorted(plan_entries.items(), key=lambda item: item[0])


def plan_summary(entry: PlanEntry) -> str:
    if entry["time"].strip():
        return f"{entry['time']} - {entry['note']}"
    return entry["note"]


def month_weeks(
    engine: AlmanacEngine,
    plan_entries: Mapping[str, PlanEntry],
    year: int,
    month: int,
) -> list[Week]:
    """
    Lay a month out as Sunday-first weeks of day cells.

    Days before the 1st and after the last day of the month are None.
    """
    days = engine.month(year, month)
    first_date = days[0][0]
    # isoweekday: Monday == 1 ... Sunday == 7
    leading_blanks = first_date.isoweekday() % 7

    cells: list[Optional[DayCell]] = [None] * leading_blanks
    for date, fact in days:
        cells.append(
            {
                "date": date,
                "fact": fact,
                "plan": plan_entries.get(date_to_iso_str(date)),
            }
        )
    while len(cells) % 7 != 0:
        cells.append(None)

    return [cells[index : index + 7] for index in range(0, len(cells), 7)]


def default_month(engine: AlmanacEngine, today: pendulum.Date) -> tuple[int, int]:
    """The current month, or January of the rule year when today falls outside it."""
    if today.year == engine.rules.year:
        return (today.year, today.month)
    return (engine.rules.year, 1)

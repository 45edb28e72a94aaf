# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from almanac.color import (
    DAY_COLOR,
    HOLIDAY_COLOR,
    REMARK_COLOR,
    plan_marker_color,
)
from almanac.model.almanac import AlmanacFact
from almanac.model.itinerary import Week
from almanac.model.plan import PlanEntry
from almanac.service.almanac import AlmanacEngine
from almanac.service.itinerary import plan_summary
from almanac.time import date_to_display_str
from almanac.view.header import header

WEEKDAY_HEADINGS = ["S", "M", "T", "W", "T", "F", "S"]


def day_view(
    engine: AlmanacEngine,
    date: pendulum.Date,
    fact: AlmanacFact,
    plan: Optional[PlanEntry],
) -> None:
    header(engine.rules, "day")

    console = Console()
    console.print(f"\n[bold]{date.format('dddd, D MMMM YYYY')}[/bold]")

    if fact.is_public_holiday:
        console.print(
            Text(f"Public holiday: {fact.remark}", style=f"bold {HOLIDAY_COLOR}")
        )
    elif fact.remark is not None:
        console.print(Text(fact.remark, style=REMARK_COLOR))

    if plan is None:
        console.print("[dim]No plan recorded.[/dim]")
        return

    line = Text()
    line.append("● ", style=plan_marker_color(plan["is_leave"]))
    line.append(plan_summary(plan))
    if plan["is_leave"]:
        line.append("  ANNUAL LEAVE", style=f"bold {HOLIDAY_COLOR}")
    console.print(line)


def month_view(
    engine: AlmanacEngine,
    year: int,
    month: int,
    weeks: list[Week],
) -> None:
    title = pendulum.date(year, month, 1).format("MMMM YYYY").upper()
    header(engine.rules, title)

    console = Console()
    grid = Table(box=box.SIMPLE, show_edge=False)
    for heading in WEEKDAY_HEADINGS:
        grid.add_column(heading, justify="center", width=4)

    remarks: list[tuple[pendulum.Date, AlmanacFact]] = []
    for week in weeks:
        row: list[Text] = []
        for cell in week:
            if cell is None:
                row.append(Text(""))
                continue

            fact = cell["fact"]
            day = Text()
            if fact.is_public_holiday:
                day.append(str(cell["date"].day), style=f"bold {HOLIDAY_COLOR}")
            else:
                day.append(str(cell["date"].day), style=DAY_COLOR)
            if fact.remark is not None and not fact.is_public_holiday:
                day.append("*", style=REMARK_COLOR)
            plan = cell["plan"]
            if plan is not None:
                day.append("•", style=plan_marker_color(plan["is_leave"]))
            row.append(day)

            if fact.remark is not None:
                remarks.append((cell["date"], fact))
        grid.add_row(*row)

    console.print(grid)

    for date, fact in remarks:
        style = f"bold {HOLIDAY_COLOR}" if fact.is_public_holiday else REMARK_COLOR
        line = Text(f"{date.format('DD ddd')}  ")
        line.append(fact.remark or "", style=style)
        console.print(line)


def holidays_view(engine: AlmanacEngine, holidays: list[tuple[pendulum.Date, str]]) -> None:
    header(engine.rules, "public holidays")

    holidays_table = Table(box=box.SIMPLE)
    holidays_table.add_column("date")
    holidays_table.add_column("holiday", style=HOLIDAY_COLOR)
    for date, name in holidays:
        holidays_table.add_row(date_to_display_str(date), Text(name))

    school_breaks_table = Table(box=box.SIMPLE)
    school_breaks_table.add_column("school break", style=REMARK_COLOR)
    school_breaks_table.add_column("start")
    school_breaks_table.add_column("end")
    for school_break in engine.school_breaks():
        school_breaks_table.add_row(
            Text(school_break.label),
            date_to_display_str(school_break.start),
            date_to_display_str(school_break.end),
        )

    console = Console()
    console.print(holidays_table)
    console.print(school_breaks_table)

# SPDX-License-Identifier: MIT

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from almanac.color import HOLIDAY_COLOR, PLAN_COLOR
from almanac.model.export import ExportEvent
from almanac.model.plan import PlanEntry
from almanac.service.almanac import AlmanacEngine
from almanac.service.itinerary import plan_summary
from almanac.time import (
    date_from_iso_str,
    date_to_display_str,
    datetime_to_display_local_datetime_str,
)
from almanac.view.header import header
from almanac.view.state import get_timezone


def itinerary_view(
    engine: AlmanacEngine, plans: list[tuple[str, PlanEntry]]
) -> None:
    header(engine.rules, "all scheduled events")

    console = Console()
    if len(plans) == 0:
        console.print("[dim]No plans recorded.[/dim]")
        return

    itinerary_table = Table(box=box.SIMPLE)
    itinerary_table.add_column("date", style=PLAN_COLOR)
    itinerary_table.add_column("plan")
    itinerary_table.add_column("leave", style=f"bold {HOLIDAY_COLOR}")
    itinerary_table.add_column("almanac", style="dim")

    for key, plan in plans:
        date = date_from_iso_str(key)
        fact = engine.lookup(date)
        itinerary_table.add_row(
            date_to_display_str(date),
            Text(plan_summary(plan)),
            "ANNUAL LEAVE" if plan["is_leave"] else "",
            Text(fact.remark or ""),
        )

    console.print(itinerary_table)


def export_view(engine: AlmanacEngine, date: pendulum.Date, event: ExportEvent) -> None:
    header(engine.rules, "calendar export")
    tz = get_timezone()

    export_table = Table(box=box.SIMPLE, show_header=False)
    export_table.add_column("field", style="cyan")
    export_table.add_column("value")
    export_table.add_row("date", date_to_display_str(date))
    export_table.add_row("title", Text(event["title"]))
    export_table.add_row("description", event["description"])
    export_table.add_row(
        "start", datetime_to_display_local_datetime_str(event["start"], tz)
    )
    export_table.add_row("end", datetime_to_display_local_datetime_str(event["end"], tz))
    export_table.add_row("begin_time_ms", str(event["begin_time_ms"]))
    export_table.add_row("end_time_ms", str(event["end_time_ms"]))

    console = Console()
    console.print(export_table)

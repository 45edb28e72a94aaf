# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from almanac.errors import PersistenceError
from almanac.initialize import AppState
from almanac.service.export import build_export_event
from almanac.service.itinerary import sorted_plans
from almanac.template.plan import get_plan_entry_template
from almanac.terminal.custom_typer import AliasedTyperGroup
from almanac.terminal.parse import parse_date
from almanac.view.views import calendar as calendar_report
from almanac.view.views import plan as plan_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"


@app.command("set, s", no_args_is_help=True)
def set(
    ctx: typer.Context,
    date: Annotated[pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)],
    note: Annotated[str, typer.Argument(help="plan note; an empty note clears the date")],
    time: Annotated[
        Optional[str], typer.Option("--time", "-t", help="e.g. 14:30")
    ] = None,
    leave: Annotated[
        bool, typer.Option("--leave", "-l", help="mark as annual leave")
    ] = False,
) -> None:
    """Record a plan for a date, replacing any existing one."""
    state = cast(AppState, ctx.obj)

    entry = get_plan_entry_template()
    entry["note"] = note
    entry["time"] = time or ""
    entry["is_leave"] = leave

    try:
        state.plans.upsert(date, entry)
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    calendar_report.day_view(
        state.engine, date, state.engine.lookup(date), state.plans.get(date)
    )


@app.command("remove, rm", no_args_is_help=True)
def remove(
    ctx: typer.Context,
    date: Annotated[pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)],
) -> None:
    """Clear the plan recorded for a date."""
    state = cast(AppState, ctx.obj)

    try:
        state.plans.delete(date)
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    plan_report.itinerary_view(state.engine, sorted_plans(state.plans.list_all()))


@app.command("list, ls")
def list_plans(ctx: typer.Context) -> None:
    """List every recorded plan in date order."""
    state = cast(AppState, ctx.obj)

    plan_report.itinerary_view(state.engine, sorted_plans(state.plans.list_all()))


@app.command("export, x", no_args_is_help=True)
def export(
    ctx: typer.Context,
    date: Annotated[pendulum.Date, typer.Argument(parser=parse_date, help=DATE_HELP)],
) -> None:
    """Show the calendar event a plan would be exported as."""
    state = cast(AppState, ctx.obj)

    plan = state.plans.get(date)
    if plan is None:
        typer.echo(f"Error: no plan recorded for {date.to_date_string()}", err=True)
        raise typer.Exit(1)

    event = build_export_event(date, plan, tz=state.timezone)
    plan_report.export_view(state.engine, date, event)

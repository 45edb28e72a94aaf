# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from almanac.initialize import AppState
from almanac.service.itinerary import default_month, month_weeks
from almanac.terminal.parse import parse_date, parse_month
from almanac.time import today
from almanac.view.views import calendar as calendar_report


def day(
    ctx: typer.Context,
    date: Annotated[
        pendulum.Date,
        typer.Argument(
            parser=parse_date,
            help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
        ),
    ],
) -> None:
    """Show holiday, remark and plan for a single date."""
    state = cast(AppState, ctx.obj)

    calendar_report.day_view(
        state.engine,
        date,
        state.engine.lookup(date),
        state.plans.get(date),
    )


def month(
    ctx: typer.Context,
    year_month: Annotated[
        Optional[str],
        typer.Argument(help="YYYY-MM, defaults to the current month"),
    ] = None,
) -> None:
    """Show a month grid with holidays, remarks and plans marked."""
    state = cast(AppState, ctx.obj)

    if year_month is None:
        year, month_number = default_month(state.engine, today(state.timezone))
    else:
        year, month_number = parse_month(year_month)

    weeks = month_weeks(state.engine, state.plans.list_all(), year, month_number)
    calendar_report.month_view(state.engine, year, month_number, weeks)


def holidays(ctx: typer.Context) -> None:
    """List every public holiday and school break in the rule table."""
    state = cast(AppState, ctx.obj)

    calendar_report.holidays_view(state.engine, state.engine.holidays())

# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer

from almanac.errors import InvalidExpenseError, PersistenceError
from almanac.initialize import AppState
from almanac.service.budget import add_expense, clear_ledger
from almanac.terminal.custom_typer import AliasedTyperGroup
from almanac.terminal.parse import parse_date
from almanac.view.views import budget as budget_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _show_ledger(state: AppState) -> None:
    budget_report.budget_view(
        state.engine,
        state.budget.list(),
        state.budget.total(),
        state.config_repo.get_config()["currency"],
    )


@app.command("add, a", no_args_is_help=True)
def add(
    ctx: typer.Context,
    item: Annotated[str, typer.Argument(help="what the money was spent on")],
    amount: Annotated[str, typer.Argument(help="amount, e.g. 10.50")],
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-d",
            parser=parse_date,
            help="defaults to today; valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset",
        ),
    ] = None,
) -> None:
    """Add an expense to the budget diary."""
    state = cast(AppState, ctx.obj)

    try:
        add_expense(state.budget, item, amount, date, tz=state.timezone)
    except InvalidExpenseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _show_ledger(state)


@app.command("list, ls")
def list_entries(ctx: typer.Context) -> None:
    """List expenses, most recent first, with the running total."""
    _show_ledger(cast(AppState, ctx.obj))


@app.command("clear")
def clear(
    ctx: typer.Context,
    yes: Annotated[bool, typer.Option("--yes", "-y", help="skip confirmation")] = False,
) -> None:
    """Remove every expense from the budget diary."""
    state = cast(AppState, ctx.obj)

    if not yes:
        typer.confirm("Remove all budget entries?", abort=True)

    try:
        removed = clear_ledger(state.budget)
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"Removed {removed} entries")

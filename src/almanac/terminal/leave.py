# SPDX-License-Identifier: MIT

from typing import Annotated, cast

import typer

from almanac.errors import PersistenceError
from almanac.initialize import AppState
from almanac.service.leave import parse_entitlement, remaining_leave, used_leave
from almanac.terminal.custom_typer import AliasedTyperGroup
from almanac.view.views import leave as leave_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _show_balance(state: AppState) -> None:
    profile = state.profile.get()
    plans = state.plans.list_all()
    leave_report.leave_view(
        state.engine,
        profile["entitlement"],
        used_leave(plans),
        remaining_leave(profile, plans),
    )


@app.command("show, s")
def show(ctx: typer.Context) -> None:
    """Show entitlement, leave used and the remaining balance."""
    _show_balance(cast(AppState, ctx.obj))


@app.command("set, e", no_args_is_help=True)
def set(
    ctx: typer.Context,
    entitlement: Annotated[
        str,
        typer.Argument(help="annual leave entitlement in days; non-numbers count as 0"),
    ],
) -> None:
    """Set the annual leave entitlement."""
    state = cast(AppState, ctx.obj)

    profile = state.profile.get()
    profile["entitlement"] = parse_entitlement(entitlement)
    try:
        state.profile.set(profile)
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    _show_balance(state)

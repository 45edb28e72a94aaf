# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Annotated, Optional

import typer

from almanac.initialize import initialize
from almanac.terminal import budget, calendar, configuration, leave, plan
from almanac.terminal.custom_typer import OrderedAliasedTyperGroup
from almanac.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="Almanac - holidays, school breaks, plans and leave for Sarawak 2026",
    no_args_is_help=True,
)
app.command(name="day, d", no_args_is_help=True)(calendar.day)
app.command(name="month, m")(calendar.month)
app.command(name="holidays, h")(calendar.holidays)
app.add_typer(plan.app, name="plan, p", help="Record, list and export plans")
app.add_typer(leave.app, name="leave, lv", help="Annual leave balance")
app.add_typer(budget.app, name="budget, b", help="Budget diary")
app.add_typer(configuration.app, name="config, c", help="Configuration")


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_path: Annotated[
        Optional[Path],
        typer.Option(
            "--data-path",
            envvar="ALMANAC_DATA_PATH",
            help="Directory holding preferences.yaml (overrides config)",
        ),
    ] = None,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output to stderr"),
    ] = False,
) -> None:
    """
    Almanac - holidays, school breaks, plans and leave for Sarawak 2026

    Global options that apply to all commands.
    """
    ctx.obj = initialize(data_path, verbose=verbose)
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()

# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import pendulum
import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from almanac import configuration
from almanac.errors import PersistenceError
from almanac.initialize import AppState
from almanac.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view(ctx: typer.Context) -> None:
    """Display current configuration settings."""
    state = cast(AppState, ctx.obj)
    config = state.config_repo.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("timezone", Text(config["timezone"]))
    table.add_row("currency", Text(config["currency"]))
    table.add_row("log_level", Text(config["log_level"]))
    table.add_row("data_path", Text(str(configuration.DATA_PATH)))
    table.add_row("config_path", Text(str(configuration.APP_CONFIG_PATH)))
    table.add_row(
        "rule_table", f"{state.engine.rules.region} {state.engine.rules.year}"
    )

    console.print(table)


@app.command("set, s")
def set(
    ctx: typer.Context,
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone",
            help="Timezone for 'today' and calendar export, e.g. Asia/Kuching",
        ),
    ] = None,
    currency: Annotated[
        Optional[str],
        typer.Option("--currency", help="Prefix shown before expense amounts"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR"),
    ] = None,
) -> None:
    """Change configuration settings."""
    state = cast(AppState, ctx.obj)

    if timezone is not None and timezone != "local":
        try:
            pendulum.timezone(timezone)
        except ValueError:
            raise typer.BadParameter(f"Unknown timezone '{timezone}'")

    try:
        state.config_repo.update_config(
            data_path=data_path,
            remove_data_path=remove_data_path,
            show_header=show_header,
            timezone=timezone,
            currency=currency,
            log_level=log_level,
        )
    except PersistenceError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    view(ctx)

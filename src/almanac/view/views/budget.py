# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from almanac.color import EXPENSE_COLOR, TOTAL_COLOR
from almanac.model.budget import BudgetEntry
from almanac.service.almanac import AlmanacEngine
from almanac.time import date_to_display_str
from almanac.view.header import header


def format_amount(amount: float, currency: str) -> str:
    return f"{currency} {amount:.2f}"


def budget_view(
    engine: AlmanacEngine,
    entries: list[BudgetEntry],
    total: float,
    currency: str,
) -> None:
    header(engine.rules, "budget diary")

    console = Console()
    if len(entries) == 0:
        console.print("[dim]No expenses recorded.[/dim]")
    else:
        budget_table = Table(box=box.SIMPLE)
        budget_table.add_column("date")
        budget_table.add_column("item")
        budget_table.add_column("amount", justify="right", style=EXPENSE_COLOR)
        for entry in entries:
            budget_table.add_row(
                date_to_display_str(entry["date"]),
                Text(entry["item"]),
                Text(format_amount(entry["amount"], currency)),
            )
        console.print(budget_table)

    console.print(
        Text(f"TOTAL: {format_amount(total, currency)}", style=f"bold {TOTAL_COLOR}")
    )

# SPDX-License-Identifier: MIT

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from almanac.color import HOLIDAY_COLOR, PLAN_COLOR
from almanac.service.almanac import AlmanacEngine
from almanac.view.header import header


def leave_view(
    engine: AlmanacEngine, entitlement: int, used: int, remaining: int
) -> None:
    header(engine.rules, "leave balance")

    balance = Text(justify="center")
    balance.append("LEAVE BALANCE\n", style=f"bold {PLAN_COLOR}")
    # Over-booked balances go negative and are shown as such
    balance.append(
        f"{remaining}\n", style=f"bold {HOLIDAY_COLOR}" if remaining < 0 else "bold"
    )
    balance.append("DAYS REMAINING\n\n", style="dim")
    balance.append(f"entitlement {entitlement}  ·  used {used}", style="dim")

    console = Console()
    console.print(Panel(balance, expand=False))

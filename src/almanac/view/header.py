# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding
from rich.text import Text

from almanac.model.almanac import AlmanacRules
from almanac.view.state import get_show_header


def header(rules: AlmanacRules, sub_header: Optional[str] = None) -> None:
    """Print the almanac banner naming the rule table a report is drawn from.

    Args:
        rules: The loaded rule table
        sub_header: Optional report name shown under the banner
    """
    if not get_show_header():
        return

    banner = Text()
    banner.append("almanac", style="dark_orange")
    banner.append(f" {rules.region} {rules.year}", style="plum1")
    print(Padding(banner, (1, 0, 0, 1)))
    if sub_header is not None:
        print(Padding(Text(sub_header, style="sandy_brown"), (0, 1)))

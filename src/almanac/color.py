# SPDX-License-Identifier: MIT

# Calendar cell colours
HOLIDAY_COLOR = "red3"
REMARK_COLOR = "sandy_brown"
DAY_COLOR = "white"

# Plan markers: leave days stand out from ordinary plans
LEAVE_COLOR = "red3"
PLAN_COLOR = "dark_orange"

EXPENSE_COLOR = "red3"
TOTAL_COLOR = "dark_orange"


def plan_marker_color(is_leave: bool) -> str:
    return LEAVE_COLOR if is_leave else PLAN_COLOR

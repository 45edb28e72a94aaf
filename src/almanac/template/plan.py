# SPDX-License-Identifier: MIT

from almanac.model.plan import PlanEntry


def get_plan_entry_template() -> PlanEntry:
    return {
        "note": "",
        "time": "",
        "is_leave": False,
    }

# SPDX-License-Identifier: MIT

import re
from typing import Mapping

from almanac.model.plan import PlanEntry
from almanac.model.profile import Profile

_ENTITLEMENT_PATTERN = re.compile(r"^\+?\d+$")


def used_leave(plan_entries: Mapping[str, PlanEntry]) -> int:
    return sum(1 for entry in plan_entries.values() if entry["is_leave"])


def remaining_leave(profile: Profile, plan_entries: Mapping[str, PlanEntry]) -> int:
    """
    Entitlement minus the number of plan entries flagged as leave.

    Not clamped: a negative result means leave is over-booked.
    """
    return profile["entitlement"] - used_leave(plan_entries)


def parse_entitlement(text: str) -> int:
    """Read an entitlement typed by the user. Anything unparsable counts as 0."""
    stripped = text.strip()
    if not _ENTITLEMENT_PATTERN.match(stripped):
        return 0
    return int(stripped)

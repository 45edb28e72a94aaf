# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional

import pendulum

from almanac.model.export import ExportEvent
from almanac.model.plan import PlanEntry
from almanac.time import datetime_to_epoch_ms, local_datetime

DEFAULT_EVENT_TIME = (9, 0)
EVENT_DURATION = pendulum.duration(minutes=60)
EVENT_DESCRIPTION = "Scheduled via Almanac Sarawak 2026"

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_event_time(time_str: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Try to read an (H)H:mm time.

    Returns:
        Tuple of (hour, minute), or None when the string is missing,
        malformed or out of range
    """
    if time_str is None:
        return None

    time_match = _TIME_PATTERN.match(time_str.strip())
    if not time_match:
        return None

    hour = int(time_match.group(1))
    minute = int(time_match.group(2))
    if hour > 23 or minute > 59:
        return None

    return (hour, minute)


def resolve_event_time(time_str: Optional[str]) -> tuple[int, int]:
    parsed = parse_event_time(time_str)
    if parsed is None:
        return DEFAULT_EVENT_TIME
    return parsed


def build_export_event(
    date: datetime.date, entry: PlanEntry, tz: str = "local"
) -> ExportEvent:
    """Describe a plan entry as a one-hour calendar event."""
    hour, minute = resolve_event_time(entry["time"])
    start = local_datetime(date, hour, minute, tz=tz)
    end = start + EVENT_DURATION
    return {
        "title": entry["note"],
        "description": EVENT_DESCRIPTION,
        "start": start,
        "end": end,
        "begin_time_ms": datetime_to_epoch_ms(start),
        "end_time_ms": datetime_to_epoch_ms(end),
    }

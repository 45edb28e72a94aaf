# SPDX-License-Identifier: MIT

import datetime
import re
from typing import cast

import pendulum

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def now_epoch_ms() -> int:
    return int(now_utc().timestamp() * 1000)


def today(tz: str = "local") -> pendulum.Date:
    return pendulum.today(tz).date()


def to_pendulum_date(value: datetime.date) -> pendulum.Date:
    """Normalise any ``datetime.date`` (or datetime) to a ``pendulum.Date``."""
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def date_to_iso_str(date: datetime.date) -> str:
    """Convert a date to the canonical 'YYYY-MM-DD' key."""
    return to_pendulum_date(date).to_date_string()


def date_from_iso_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string. Raises ValueError on anything else."""
    text = date_str.strip()
    if not _ISO_DATE_PATTERN.match(text):
        raise ValueError(f"expected YYYY-MM-DD, got {date_str!r}")
    return cast(pendulum.Date, pendulum.parse(text, exact=True))


def date_to_display_str(date: datetime.date) -> str:
    return to_pendulum_date(date).format("YYYY-MM-DD ddd")


def local_datetime(
    date: datetime.date, hour: int, minute: int, tz: str = "local"
) -> pendulum.DateTime:
    return pendulum.datetime(date.year, date.month, date.day, hour, minute, tz=tz)


def datetime_to_epoch_ms(datetime: pendulum.DateTime) -> int:
    return datetime.int_timestamp * 1000


def datetime_to_display_local_datetime_str(
    datetime: pendulum.DateTime, tz: str = "local"
) -> str:
    return datetime.in_tz(tz).format("MMM-DD ddd HH:mm")

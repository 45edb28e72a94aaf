# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from almanac.time import date_from_iso_str, today
from almanac.view.state import get_timezone

_MONTH_PATTERN = re.compile(r"^(\d{4})-(\d{1,2})$")


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param).strip()

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_iso_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date '{date}': {e}")

    # Relative dates count from today in the configured timezone
    current = today(get_timezone())

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return current.add(days=int(date))

    if date == "today" or date == "t":
        return current
    if date == "yesterday" or date == "y":
        return current.subtract(days=1)
    if date == "tomorrow" or date == "o":
        return current.add(days=1)
    raise typer.BadParameter("Incorrect date format")


def parse_month(month_param: str) -> tuple[int, int]:
    """
    Parse a month in YYYY-MM format.

    Returns:
        Tuple of (year, month)

    Raises:
        typer.BadParameter: If the format is invalid or the month is out of range
    """
    month_match = _MONTH_PATTERN.match(month_param.strip())
    if not month_match:
        raise typer.BadParameter(
            f"Month must be in YYYY-MM format (e.g., 2026-03), got '{month_param}'"
        )

    year = int(month_match.group(1))
    month = int(month_match.group(2))
    if month < 1 or month > 12:
        raise typer.BadParameter(f"Month must be between 1 and 12, got {month}")

    return (year, month)

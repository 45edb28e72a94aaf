# SPDX-License-Identifier: MIT

import datetime
import math
from typing import Optional

from almanac.errors import InvalidExpenseError
from almanac.model.budget import BudgetEntry
from almanac.repository.budget import BudgetRepository
from almanac.time import today


def parse_amount(text: str) -> Optional[float]:
    """Parse an amount typed by the user, or None if it is not a finite number."""
    try:
        amount = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def add_expense(
    ledger: BudgetRepository,
    item: str,
    amount: str,
    date: Optional[datetime.date] = None,
    tz: str = "local",
) -> BudgetEntry:
    """
    Validate raw expense input and append it to the ledger.

    Raises:
        InvalidExpenseError: If item is blank or amount is not a number.
            Nothing is recorded in that case.
    """
    if not item.strip():
        raise InvalidExpenseError("Item name cannot be blank")

    parsed_amount = parse_amount(amount)
    if parsed_amount is None:
        raise InvalidExpenseError(f"Amount must be a number, got '{amount}'")

    if date is None:
        date = today(tz)

    return ledger.add(item.strip(), parsed_amount, date)


def clear_ledger(ledger: BudgetRepository) -> int:
    """Empty the ledger and return how many entries were removed."""
    removed = len(ledger.list())
    ledger.set_all([])
    return removed

# SPDX-License-Identifier: MIT

import datetime
import math
import threading
from copy import deepcopy
from typing import Any, Callable, Optional

import structlog

from almanac import configuration
from almanac.model.budget import BudgetEntry
from almanac.repository.preferences import PreferenceStore
from almanac.time import (
    date_from_iso_str,
    date_to_iso_str,
    now_epoch_ms,
    to_pendulum_date,
)

log = structlog.get_logger(__name__)


class BudgetRepository:
    """
    Append-only expense ledger.

    Entries are never edited or removed one at a time; corrections are new
    offsetting entries, and set_all() replaces the whole ledger.
    """

    def __init__(
        self,
        preferences: PreferenceStore,
        clock: Callable[[], int] = now_epoch_ms,
    ) -> None:
        self._preferences = preferences
        self._clock = clock
        self._entries: Optional[list[BudgetEntry]] = None
        self._lock = threading.RLock()

    @property
    def entries(self) -> list[BudgetEntry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    def __load_data(self) -> None:
        raw_entries = self._preferences.get_json(configuration.BUDGET_KEY, [])
        if not isinstance(raw_entries, list):
            log.warning("budget_not_a_list", key=configuration.BUDGET_KEY)
            raw_entries = []

        entries: list[BudgetEntry] = []
        for raw_entry in raw_entries:
            entry = self.__convert_entry_for_deserialization(raw_entry)
            if entry is None:
                log.warning("budget_entry_skipped", entry=raw_entry)
                continue
            entries.append(entry)
        self._entries = entries

    def __save_data(self, entries: list[BudgetEntry]) -> None:
        serializable_entries = [
            self.__convert_entry_for_serialization(entry) for entry in entries
        ]
        self._preferences.put_json(configuration.BUDGET_KEY, serializable_entries)
        log.debug("budget_saved", count=len(entries))

    def __convert_entry_for_serialization(self, entry: BudgetEntry) -> dict[str, Any]:
        return {
            "id": entry["id"],
            "item": entry["item"],
            "amount": entry["amount"],
            "date": date_to_iso_str(entry["date"]),
        }

    def __convert_entry_for_deserialization(
        self, raw_entry: Any
    ) -> Optional[BudgetEntry]:
        if not isinstance(raw_entry, dict):
            return None
        entry_id = raw_entry.get("id")
        item = raw_entry.get("item")
        amount = raw_entry.get("amount")
        date = raw_entry.get("date")
        if isinstance(entry_id, bool) or not isinstance(entry_id, int):
            return None
        if not isinstance(item, str):
            return None
        if isinstance(amount, bool) or not isinstance(amount, (int, float)):
            return None
        if not math.isfinite(amount) or not isinstance(date, str):
            return None
        try:
            parsed_date = date_from_iso_str(date)
        except ValueError:
            return None
        return {
            "id": entry_id,
            "item": item,
            "amount": float(amount),
            "date": parsed_date,
        }

    def __next_id(self) -> int:
        now = self._clock()
        if not self.entries:
            return now
        return max(now, max(entry["id"] for entry in self.entries) + 1)

    def add(self, item: str, amount: float, date: datetime.date) -> BudgetEntry:
        with self._lock:
            entry: BudgetEntry = {
                "id": self.__next_id(),
                "item": item,
                "amount": float(amount),
                "date": to_pendulum_date(date),
            }
            updated = self.entries + [entry]
            self.__save_data(updated)
            self._entries = updated
            return deepcopy(entry)

    def total(self) -> float:
        with self._lock:
            return sum(entry["amount"] for entry in self.entries)

    def set_all(self, entries: list[BudgetEntry]) -> None:
        with self._lock:
            updated = deepcopy(entries)
            self.__save_data(updated)
            self._entries = updated

    def list(self) -> list[BudgetEntry]:
        """All entries, most recent (highest id) first."""
        with self._lock:
            return sorted(
                deepcopy(self.entries), key=lambda entry: entry["id"], reverse=True
            )

# SPDX-License-Identifier: MIT

import datetime
import threading
from copy import deepcopy
from typing import Any, Optional

import structlog

from almanac import configuration
from almanac.model.plan import PlanEntry, Plans
from almanac.repository.preferences import PreferenceStore
from almanac.time import date_from_iso_str, date_to_iso_str

log = structlog.get_logger(__name__)


class PlanRepository:
    def __init__(self, preferences: PreferenceStore) -> None:
        self._preferences = preferences
        self._plans: Optional[Plans] = None
        self._lock = threading.RLock()

    @property
    def plans(self) -> Plans:
        if self._plans is None:
            self.__load_data()
        if self._plans is None:
            raise ValueError()
        return self._plans

    def __load_data(self) -> None:
        raw_plans = self._preferences.get_json(configuration.PLANS_KEY, {})
        if not isinstance(raw_plans, dict):
            log.warning("plans_not_a_mapping", key=configuration.PLANS_KEY)
            raw_plans = {}

        plans: Plans = {}
        for key, raw_plan in raw_plans.items():
            plan = self.__convert_plan_for_deserialization(raw_plan)
            if plan is None:
                log.warning("plan_skipped", date=key)
                continue
            try:
                plans[date_to_iso_str(date_from_iso_str(key))] = plan
            except ValueError:
                log.warning("plan_skipped", date=key)
        self._plans = plans

    def __save_data(self, plans: Plans) -> None:
        serializable_plans = {
            key: self.__convert_plan_for_serialization(plan)
            for key, plan in plans.items()
        }
        self._preferences.put_json(configuration.PLANS_KEY, serializable_plans)
        log.debug("plans_saved", count=len(plans))

    def __convert_plan_for_serialization(self, plan: PlanEntry) -> dict[str, Any]:
        return {
            "note": plan["note"],
            "time": plan["time"],
            "isLeave": plan["is_leave"],
        }

    def __convert_plan_for_deserialization(self, raw_plan: Any) -> Optional[PlanEntry]:
        if not isinstance(raw_plan, dict):
            return None
        note = raw_plan.get("note")
        if not isinstance(note, str) or not note.strip():
            return None
        time = raw_plan.get("time")
        return {
            "note": note,
            "time": time if isinstance(time, str) else "",
            "is_leave": raw_plan.get("isLeave") is True,
        }

    def get(self, date: datetime.date) -> Optional[PlanEntry]:
        with self._lock:
            plan = self.plans.get(date_to_iso_str(date))
            return deepcopy(plan)

    def upsert(self, date: datetime.date, entry: PlanEntry) -> None:
        """Store entry for date. A blank note deletes the date's entry instead."""
        if not entry["note"].strip():
            self.delete(date)
            return

        with self._lock:
            updated = dict(self.plans)
            updated[date_to_iso_str(date)] = {
                "note": entry["note"],
                "time": entry["time"],
                "is_leave": entry["is_leave"],
            }
            self.__save_data(updated)
            self._plans = updated

    def delete(self, date: datetime.date) -> None:
        with self._lock:
            key = date_to_iso_str(date)
            if key not in self.plans:
                return
            updated = dict(self.plans)
            del updated[key]
            self.__save_data(updated)
            self._plans = updated

    def list_all(self) -> Plans:
        with self._lock:
            return deepcopy(self.plans)

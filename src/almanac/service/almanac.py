# SPDX-License-Identifier: MIT

import datetime
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

import pendulum
import structlog
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from almanac.errors import RuleTableError
from almanac.model.almanac import AlmanacFact, AlmanacRules, SchoolBreak
from almanac.time import date_from_iso_str, date_to_iso_str, to_pendulum_date

log = structlog.get_logger(__name__)

DEFAULT_RULES_RESOURCE = "sarawak_2026.yaml"

NO_FACT = AlmanacFact(is_public_holiday=False, remark=None)


class AlmanacEngine:
    """
    Maps a date to its almanac fact.

    Precedence for the remark slot:
    1. Public holiday name (also sets is_public_holiday)
    2. Observance remark for that exact date
    3. Label of the first school break containing the date
    """

    def __init__(self, rules: AlmanacRules) -> None:
        self._rules = rules

    @property
    def rules(self) -> AlmanacRules:
        return self._rules

    def lookup(self, date: datetime.date) -> AlmanacFact:
        key = date_to_iso_str(date)

        holiday = self._rules.public_holidays.get(key)
        if holiday is not None:
            return AlmanacFact(is_public_holiday=True, remark=holiday)

        observance = self._rules.observances.get(key)
        if observance is not None:
            return AlmanacFact(is_public_holiday=False, remark=observance)

        day = to_pendulum_date(date)
        for school_break in self._rules.school_breaks:
            if school_break.contains(day):
                return AlmanacFact(is_public_holiday=False, remark=school_break.label)

        return NO_FACT

    def holidays(self) -> list[tuple[pendulum.Date, str]]:
        return sorted(
            (date_from_iso_str(key), name)
            for key, name in self._rules.public_holidays.items()
        )

    def school_breaks(self) -> tuple[SchoolBreak, ...]:
        return self._rules.school_breaks

    def month(self, year: int, month: int) -> list[tuple[pendulum.Date, AlmanacFact]]:
        first = pendulum.date(year, month, 1)
        days = [first.add(days=offset) for offset in range(first.days_in_month)]
        return [(day, self.lookup(day)) for day in days]


def parse_rules(text: str) -> AlmanacRules:
    try:
        raw = load(text, Loader=Loader)
    except YAMLError as e:
        raise RuleTableError(f"rule table is not valid YAML: {e}") from e

    if not isinstance(raw, dict):
        raise RuleTableError("rule table must be a mapping")

    try:
        region = str(raw["region"])
        year = int(raw["year"])
    except (KeyError, TypeError, ValueError) as e:
        raise RuleTableError(f"rule table needs a region and a numeric year: {e}")

    public_holidays = _parse_date_table(raw, "public_holidays")
    observances = _parse_date_table(raw, "observances")
    school_breaks = _parse_school_breaks(raw)

    for key in sorted(public_holidays.keys() & observances.keys()):
        log.debug(
            "observance_shadowed_by_holiday",
            date=key,
            holiday=public_holidays[key],
            observance=observances[key],
        )
    log.debug(
        "rules_loaded",
        region=region,
        year=year,
        public_holidays=len(public_holidays),
        observances=len(observances),
        school_breaks=len(school_breaks),
    )

    return AlmanacRules(
        region=region,
        year=year,
        public_holidays=public_holidays,
        observances=observances,
        school_breaks=school_breaks,
    )


def load_rules(path: Path) -> AlmanacRules:
    return parse_rules(path.read_text(encoding="utf-8"))


@cache
def default_rules() -> AlmanacRules:
    text = (
        resources.files("almanac")
        .joinpath("data", DEFAULT_RULES_RESOURCE)
        .read_text(encoding="utf-8")
    )
    return parse_rules(text)


@cache
def default_engine() -> AlmanacEngine:
    return AlmanacEngine(default_rules())


def lookup(date: datetime.date) -> AlmanacFact:
    """Look a date up against the bundled rule table."""
    return default_engine().lookup(date)


def _parse_date_key(key: Any, section: str) -> str:
    # Unquoted YAML dates arrive as datetime.date
    if isinstance(key, datetime.date):
        return date_to_iso_str(key)
    try:
        return date_to_iso_str(date_from_iso_str(str(key)))
    except ValueError as e:
        raise RuleTableError(f"{section}: invalid date {key!r}") from e


def _parse_date_table(raw: dict[str, Any], section: str) -> dict[str, str]:
    entries = raw.get(section)
    if entries is None:
        return {}
    if not isinstance(entries, dict):
        raise RuleTableError(f"{section} must be a mapping of date to text")

    table: dict[str, str] = {}
    for key, text in entries.items():
        if not isinstance(text, str) or not text.strip():
            raise RuleTableError(f"{section}: empty text for {key!r}")
        table[_parse_date_key(key, section)] = text.strip()
    return table


def _parse_school_breaks(raw: dict[str, Any]) -> tuple[SchoolBreak, ...]:
    entries = raw.get("school_breaks")
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise RuleTableError("school_breaks must be a list")

    school_breaks: list[SchoolBreak] = []
    for entry in entries:
        if not isinstance(entry, dict) or not entry.get("label"):
            raise RuleTableError(f"school_breaks: entry needs a label: {entry!r}")
        label = str(entry["label"])
        start = date_from_iso_str(_parse_date_key(entry.get("start"), label))
        end = date_from_iso_str(_parse_date_key(entry.get("end"), label))
        if start > end:
            raise RuleTableError(f"{label}: start {start} is after end {end}")
        school_breaks.append(SchoolBreak(label=label, start=start, end=end))
    return tuple(school_breaks)

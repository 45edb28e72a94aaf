# SPDX-License-Identifier: MIT

import datetime
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

import pendulum


@dataclass(frozen=True)
class AlmanacFact:
    is_public_holiday: bool
    remark: Optional[str]


@dataclass(frozen=True)
class SchoolBreak:
    label: str
    start: pendulum.Date
    end: pendulum.Date

    def contains(self, date: datetime.date) -> bool:
        return self.start <= date <= self.end


@dataclass(frozen=True)
class AlmanacRules:
    region: str
    year: int
    public_holidays: Mapping[str, str]
    observances: Mapping[str, str]
    school_breaks: tuple[SchoolBreak, ...]

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "public_holidays", MappingProxyType(dict(self.public_holidays))
        )
        object.__setattr__(
            self, "observances", MappingProxyType(dict(self.observances))
        )
        object.__setattr__(self, "school_breaks", tuple(self.school_breaks))

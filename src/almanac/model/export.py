# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class ExportEvent(TypedDict):
    title: str
    description: str
    start: pendulum.DateTime
    end: pendulum.DateTime
    begin_time_ms: int
    end_time_ms: int

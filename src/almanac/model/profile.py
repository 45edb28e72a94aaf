# SPDX-License-Identifier: MIT

from typing import TypedDict

DEFAULT_ENTITLEMENT = 14


class Profile(TypedDict):
    entitlement: int

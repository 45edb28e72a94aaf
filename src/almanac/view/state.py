"""Per-invocation settings shared by parsing and views, held in a context variable."""

# SPDX-License-Identifier: MIT

from contextvars import ContextVar
from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ViewSettings:
    show_header: bool = True
    # Zone for "today", relative dates and export times
    timezone: str = "local"


_view_settings_var: ContextVar[ViewSettings] = ContextVar(
    "view_settings", default=ViewSettings()
)


def get_view_settings() -> ViewSettings:
    return _view_settings_var.get()


def set_show_header(value: bool) -> None:
    """Set whether the almanac header is printed above reports.

    Args:
        value: True to show headers, False to hide them
    """
    _view_settings_var.set(replace(get_view_settings(), show_header=value))


def get_show_header() -> bool:
    return get_view_settings().show_header


def set_timezone(tz: str) -> None:
    _view_settings_var.set(replace(get_view_settings(), timezone=tz))


def get_timezone() -> str:
    return get_view_settings().timezone

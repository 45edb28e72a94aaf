# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

import structlog
from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

log = structlog.get_logger(__name__)

APP_NAME = "almanac"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_PREFERENCES_PATH: Path = DATA_PATH / "preferences.yaml"

# Keys in the preferences store
PROFILE_KEY = "u"
PLANS_KEY = "p"
BUDGET_KEY = "b"


class Configuration(TypedDict):
    data_path: Optional[str]
    show_header: bool
    timezone: str
    currency: str
    log_level: str


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "show_header": True,
        "timezone": "local",
        "currency": "RM",
        "log_level": "WARNING",
    }


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_PREFERENCES_PATH

    DATA_PATH = data_path
    DATA_PREFERENCES_PATH = DATA_PATH / "preferences.yaml"


def load_data_path_configuration(override: Optional[Path] = None) -> None:
    """
    Resolve DATA_PATH from, in order, an explicit override, the data_path
    setting in config.yaml, or the platform default.

    This must be called before any stores are built.
    """
    if override is not None:
        set_data_path(override)
        return

    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    try:
        config = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    except YAMLError:
        log.warning("config_unreadable", path=str(APP_CONFIG_PATH))
        return
    if not isinstance(config, dict):
        return
    data_path_setting = config.get("data_path")

    if isinstance(data_path_setting, str):
        set_data_path(Path(data_path_setting).expanduser())

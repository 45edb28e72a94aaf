# SPDX-License-Identifier: MIT

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from almanac import configuration
from almanac.logger import configure_logging
from almanac.repository.budget import BudgetRepository
from almanac.repository.configuration import ConfigurationRepository
from almanac.repository.plan import PlanRepository
from almanac.repository.preferences import PreferenceStore
from almanac.repository.profile import ProfileRepository
from almanac.service.almanac import AlmanacEngine, default_engine
from almanac.view import state as view_state


@dataclass
class AppState:
    """Everything a command needs, built once per invocation."""

    config_repo: ConfigurationRepository
    engine: AlmanacEngine
    plans: PlanRepository
    profile: ProfileRepository
    budget: BudgetRepository

    @property
    def timezone(self) -> str:
        return self.config_repo.get_config()["timezone"]


def initialize(data_path: Optional[Path] = None, verbose: bool = False) -> AppState:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration(data_path)
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)

    configuration_repo = ConfigurationRepository()
    config = configuration_repo.get_config()
    configure_logging("DEBUG" if verbose else config["log_level"])
    view_state.set_show_header(config["show_header"])
    view_state.set_timezone(config["timezone"])

    preferences = PreferenceStore(configuration.DATA_PREFERENCES_PATH)
    return AppState(
        config_repo=configuration_repo,
        engine=default_engine(),
        plans=PlanRepository(preferences),
        profile=ProfileRepository(preferences),
        budget=BudgetRepository(preferences),
    )


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        config = configuration.get_default_configuration()
        configuration.APP_CONFIG_PATH.write_text(dump(dict(config), Dumper=Dumper))

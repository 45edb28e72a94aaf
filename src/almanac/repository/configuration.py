# SPDX-License-Identifier: MIT

from copy import deepcopy
from pathlib import Path
from typing import Optional

import structlog
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from almanac import configuration
from almanac.errors import PersistenceError

log = structlog.get_logger(__name__)


class ConfigurationRepository:
    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = path
        self._config: Optional[configuration.Configuration] = None

    @property
    def path(self) -> Path:
        if self._path is not None:
            return self._path
        return configuration.APP_CONFIG_PATH

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        defaults = configuration.get_default_configuration()
        loaded = None
        if self.path.is_file():
            try:
                loaded = load(self.path.read_text(), Loader=Loader)
            except YAMLError:
                log.warning("config_unreadable", path=str(self.path))
        if not isinstance(loaded, dict):
            loaded = {}

        # Fill in any settings added since the file was written
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        self._config = loaded  # type: ignore[assignment]

    def __save_data(self, config: configuration.Configuration) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(dict(config), Dumper=Dumper))
        except OSError as e:
            raise PersistenceError(f"could not write {self.path}: {e}") from e

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
        show_header: Optional[bool] = None,
        timezone: Optional[str] = None,
        currency: Optional[str] = None,
        log_level: Optional[str] = None,
    ) -> None:
        if data_path is not None:
            self.config["data_path"] = data_path
        if remove_data_path:
            self.config["data_path"] = None
        if show_header is not None:
            self.config["show_header"] = show_header
        if timezone is not None:
            self.config["timezone"] = timezone
        if currency is not None:
            self.config["currency"] = currency
        if log_level is not None:
            self.config["log_level"] = log_level.upper()

        self.__save_data(self.config)

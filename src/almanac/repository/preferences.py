# SPDX-License-Identifier: MIT

import json
import os
import tempfile
import threading
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional

import structlog
from yaml import YAMLError, dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader  # noqa: F401
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from almanac.errors import PersistenceError

log = structlog.get_logger(__name__)


class PreferenceStore:
    """
    Key-value settings surface backed by a single YAML file.

    Each key holds a JSON-serialised string. Every write replaces the whole
    file atomically, so a crash never leaves a half-written store behind.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self.lock = threading.RLock()
        self._values: Optional[dict[str, str]] = None

    @property
    def values(self) -> dict[str, str]:
        if self._values is None:
            self.__load_data()
        if self._values is None:
            raise ValueError()
        return self._values

    def __load_data(self) -> None:
        if not self.path.is_file():
            self._values = {}
            return

        try:
            raw = load(self.path.read_text(encoding="utf-8"), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError):
            log.warning("preferences_unreadable", path=str(self.path), exc_info=True)
            raw = None

        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            log.warning("preferences_not_a_mapping", path=str(self.path))
            raw = {}

        self._values = {
            str(key): value for key, value in raw.items() if isinstance(value, str)
        }

    def __save_data(self, values: dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, temp_name = tempfile.mkstemp(
                dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as temp_file:
                    temp_file.write(dump(values, Dumper=Dumper, allow_unicode=True))
                    temp_file.flush()
                    os.fsync(temp_file.fileno())
                os.replace(temp_name, self.path)
            except BaseException:
                Path(temp_name).unlink(missing_ok=True)
                raise
        except OSError as e:
            raise PersistenceError(f"could not write {self.path}: {e}") from e

        log.debug("preferences_saved", path=str(self.path), keys=sorted(values))

    def get_string(self, key: str) -> Optional[str]:
        with self.lock:
            return self.values.get(key)

    def put_string(self, key: str, value: str) -> None:
        with self.lock:
            updated = dict(self.values)
            updated[key] = value
            self.__save_data(updated)
            self._values = updated

    def remove(self, key: str) -> None:
        with self.lock:
            if key not in self.values:
                return
            updated = dict(self.values)
            del updated[key]
            self.__save_data(updated)
            self._values = updated

    def get_json(self, key: str, default: Any = None) -> Any:
        """
        Decode the JSON value stored under key.

        A missing key returns a copy of default. So does a value that is not
        valid JSON; that case is logged and the stored value is left alone.
        """
        raw = self.get_string(key)
        if raw is None:
            return deepcopy(default)
        try:
            return json.loads(raw)
        except ValueError:
            log.warning("preference_corrupt", key=key)
            return deepcopy(default)

    def put_json(self, key: str, value: Any) -> None:
        self.put_string(key, json.dumps(value, ensure_ascii=False))

# SPDX-License-Identifier: MIT

import threading
from copy import deepcopy
from typing import Any, Optional

import structlog

from almanac import configuration
from almanac.model.profile import Profile
from almanac.repository.preferences import PreferenceStore
from almanac.template.profile import get_profile_template

log = structlog.get_logger(__name__)


class ProfileRepository:
    def __init__(self, preferences: PreferenceStore) -> None:
        self._preferences = preferences
        self._profile: Optional[Profile] = None
        self._lock = threading.RLock()

    @property
    def profile(self) -> Profile:
        if self._profile is None:
            self.__load_data()
        if self._profile is None:
            raise ValueError()
        return self._profile

    def __load_data(self) -> None:
        raw_profile = self._preferences.get_json(configuration.PROFILE_KEY)
        if raw_profile is None:
            self._profile = get_profile_template()
            return

        profile = self.__convert_profile_for_deserialization(raw_profile)
        if profile is None:
            log.warning("profile_invalid", key=configuration.PROFILE_KEY)
            profile = get_profile_template()
        self._profile = profile

    def __convert_profile_for_deserialization(
        self, raw_profile: Any
    ) -> Optional[Profile]:
        if not isinstance(raw_profile, dict):
            return None
        entitlement = raw_profile.get("entitlement")
        if isinstance(entitlement, bool) or not isinstance(entitlement, int):
            return None
        if entitlement < 0:
            return None
        return {"entitlement": entitlement}

    def get(self) -> Profile:
        with self._lock:
            return deepcopy(self.profile)

    def set(self, profile: Profile) -> None:
        entitlement = profile["entitlement"]
        if isinstance(entitlement, bool) or not isinstance(entitlement, int):
            raise ValueError(f"entitlement must be an integer, got {entitlement!r}")
        if entitlement < 0:
            raise ValueError(f"entitlement cannot be negative, got {entitlement}")

        with self._lock:
            updated: Profile = {"entitlement": entitlement}
            self._preferences.put_json(configuration.PROFILE_KEY, dict(updated))
            self._profile = updated
            log.debug("profile_saved", entitlement=entitlement)

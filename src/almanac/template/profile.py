# SPDX-License-Identifier: MIT

from almanac.model.profile import DEFAULT_ENTITLEMENT, Profile


def get_profile_template() -> Profile:
    return {"entitlement": DEFAULT_ENTITLEMENT}

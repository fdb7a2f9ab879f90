from __future__ import annotations

from .profiles import PROFILE_FIELDS, ProfileNames, ProfileStore, check_profile_name

__all__ = [
    "PROFILE_FIELDS",
    "ProfileNames",
    "ProfileStore",
    "check_profile_name",
]

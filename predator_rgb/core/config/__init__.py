"""Static defaults and filesystem locations."""

from __future__ import annotations

from .defaults import DEFAULTS
from .paths import config_dir, device_path, profiles_dir, static_device_path

__all__ = [
    "DEFAULTS",
    "config_dir",
    "device_path",
    "profiles_dir",
    "static_device_path",
]

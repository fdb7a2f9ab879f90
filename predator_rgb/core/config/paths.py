"""Filesystem locations.

Kept separate from the defaults table so tests can redirect every path through
environment variables without touching the user's real config or device nodes.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_DEVICE = "/dev/acer-gkbbl-0"
DEFAULT_STATIC_DEVICE = "/dev/acer-gkbbl-static-0"


def config_dir() -> Path:
    """Return the directory used for predator-rgb configuration.

    Priority:
    - PREDATOR_RGB_CONFIG_DIR
    - XDG_CONFIG_HOME/predator
    - ~/.config/predator
    """

    p = os.environ.get("PREDATOR_RGB_CONFIG_DIR")
    if p:
        return Path(p)

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "predator"

    return Path.home() / ".config" / "predator"


def profiles_dir() -> Path:
    """Return the profile directory.

    Priority:
    - PREDATOR_RGB_PROFILES_DIR (explicit override)
    - config_dir()/profiles
    """

    p = os.environ.get("PREDATOR_RGB_PROFILES_DIR")
    if p:
        return Path(p)
    return config_dir() / "profiles"


def device_path() -> str:
    return os.environ.get("PREDATOR_RGB_DEVICE") or DEFAULT_DEVICE


def static_device_path() -> str:
    return os.environ.get("PREDATOR_RGB_STATIC_DEVICE") or DEFAULT_STATIC_DEVICE

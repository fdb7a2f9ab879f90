"""Default values for every lighting field.

Read once by the CLI and the interactive prompts; never mutated at runtime.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping

DEFAULTS: Final[Mapping[str, Any]] = MappingProxyType(
    {
        "mode": "static",
        "zones": "0",  # 0 = all zones
        "speed": 4,  # 0-9
        "brightness": 100,  # percent
        "direction": "left-to-right",
        "color": (240, 48, 32),  # red, green, blue
    }
)

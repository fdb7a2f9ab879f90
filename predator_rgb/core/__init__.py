"""Core lighting model, protocol encoder and profile storage.

Backward compatibility:
- `from predator_rgb.core import LightingConfiguration, encode` keeps working
  even if the modules below get split further.
"""

from __future__ import annotations

from .colors import RGBColor, parse_color, resolve_color
from .errors import PredatorRGBError
from .lighting import Direction, LightingConfiguration, LightingMode, ZoneMask, build_configuration
from .protocol import CommandFrame, encode

__all__ = [
    "CommandFrame",
    "Direction",
    "LightingConfiguration",
    "LightingMode",
    "PredatorRGBError",
    "RGBColor",
    "ZoneMask",
    "build_configuration",
    "encode",
    "parse_color",
    "resolve_color",
]

from __future__ import annotations

from .base import DeviceTransport, ProbeResult
from .gkbbl import GkbblTransport
from .writer import apply_frames

__all__ = [
    "DeviceTransport",
    "GkbblTransport",
    "ProbeResult",
    "apply_frames",
]

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from ..protocol import CommandFrame


class DeviceTransport(Protocol):
    """Minimal protocol for writing command frames to the keyboard controller.

    `write` must send the whole frame or raise; it never retries.
    """

    def write(self, frame: CommandFrame) -> None: ...

    def close(self) -> None: ...


@dataclass(frozen=True)
class ProbeResult:
    """Result of probing a transport for availability on this system.

    `available` should be True only when the device nodes exist and are
    writable by the current user.
    """

    available: bool
    reason: str = ""
    identifiers: dict[str, str] = field(default_factory=dict)

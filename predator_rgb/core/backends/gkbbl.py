from __future__ import annotations

import logging
import os
from typing import BinaryIO, Optional

from ..config.paths import device_path, static_device_path
from ..protocol import CommandFrame, FrameTarget
from .base import ProbeResult

logger = logging.getLogger(__name__)

_REAL_DEVICE_PREFIX = "/dev/acer-gkbbl"


def _hardware_allowed() -> bool:
    return os.environ.get("PREDATOR_RGB_ALLOW_HARDWARE") == "1"


def _is_real_device(path: str) -> bool:
    try:
        return os.path.realpath(path).startswith(_REAL_DEVICE_PREFIX)
    except Exception:
        return False


class GkbblTransport:
    """Writes frames to the acer-gkbbl character devices.

    Device nodes are opened lazily on the first frame addressed to them and
    kept open until `close()`.
    """

    def __init__(self, *, device: Optional[str] = None, static_device: Optional[str] = None) -> None:
        self.paths: dict[FrameTarget, str] = {
            FrameTarget.DYNAMIC: device or device_path(),
            FrameTarget.STATIC: static_device or static_device_path(),
        }
        self._handles: dict[FrameTarget, BinaryIO] = {}

    def __enter__(self) -> "GkbblTransport":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def path_for(self, frame: CommandFrame) -> str:
        return self.paths[frame.target]

    def _open(self, target: FrameTarget) -> BinaryIO:
        handle = self._handles.get(target)
        if handle is not None:
            return handle

        path = self.paths[target]
        # Safety: tests must not mutate real hardware state.
        if os.environ.get("PYTEST_CURRENT_TEST") and not _hardware_allowed() and _is_real_device(path):
            raise RuntimeError(f"Refusing to open real device under pytest: {path}")

        logger.debug("Opening %s device %s", target.value, path)
        # O_WRONLY without O_CREAT: a missing node must fail, never become a regular file.
        handle = os.fdopen(os.open(path, os.O_WRONLY), "wb", buffering=0)
        self._handles[target] = handle
        return handle

    def write(self, frame: CommandFrame) -> None:
        handle = self._open(frame.target)
        written = handle.write(frame.payload)
        if written is not None and written != len(frame.payload):
            raise OSError(f"short write: {written} of {len(frame.payload)} bytes")
        logger.debug("Wrote %s frame %s", frame.target.value, frame.hex())

    def close(self) -> None:
        handles, self._handles = self._handles, {}
        for handle in handles.values():
            handle.close()

    def probe(self) -> ProbeResult:
        identifiers = {target.value: path for target, path in self.paths.items()}
        for target, path in self.paths.items():
            if not os.path.exists(path):
                return ProbeResult(
                    available=False,
                    reason=f"{target.value} device {path} not found (is the acer-predator-turbo module loaded?)",
                    identifiers=identifiers,
                )
            if not os.access(path, os.W_OK):
                return ProbeResult(
                    available=False,
                    reason=f"{target.value} device {path} is not writable",
                    identifiers=identifiers,
                )
        return ProbeResult(available=True, reason="device nodes present", identifiers=identifiers)

from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from ..errors import DeviceWriteError
from ..protocol import CommandFrame
from ..utils.exceptions import is_device_missing, is_permission_denied
from .base import DeviceTransport

logger = logging.getLogger(__name__)


def describe_write_failure(exc: Exception) -> str:
    if is_permission_denied(exc):
        return "permission denied (run as root or install a udev rule for the acer-gkbbl devices)"
    if is_device_missing(exc):
        return "device not found (is the acer-predator-turbo kernel module loaded?)"
    return str(exc) or type(exc).__name__


def apply_frames(
    transport: DeviceTransport,
    frames: Iterable[CommandFrame],
    *,
    device_name: Optional[Callable[[CommandFrame], str]] = None,
) -> int:
    """Write *frames* in order and return how many were written.

    The first failure raises DeviceWriteError; remaining frames are not sent
    and nothing is retried.
    """

    count = 0
    for index, frame in enumerate(frames):
        try:
            transport.write(frame)
        except OSError as exc:
            name = device_name(frame) if device_name is not None else frame.target.device()
            logger.debug("Frame %d to %s failed", index, name, exc_info=exc)
            raise DeviceWriteError(name, index, describe_write_failure(exc)) from exc
        count += 1
    return count

"""Error kinds raised by the core.

Every error carries the offending value (or profile name / device path) so the
CLI can turn it into a one-line message without extra context.
"""

from __future__ import annotations

from typing import Any


class PredatorRGBError(Exception):
    """Base class for every failure the CLI reports to the user."""


class ValidationError(PredatorRGBError, ValueError):
    kind = "invalid value"

    def __init__(self, value: Any, detail: str = "") -> None:
        self.value = value
        self.detail = detail
        msg = f"{self.kind}: {value!r}"
        if detail:
            msg = f"{msg} ({detail})"
        super().__init__(msg)


class InvalidColorError(ValidationError):
    kind = "invalid color format"


class InvalidZoneError(ValidationError):
    kind = "invalid zone"


class InvalidSpeedError(ValidationError):
    kind = "invalid speed"


class InvalidBrightnessError(ValidationError):
    kind = "invalid brightness"


class InvalidModeError(ValidationError):
    kind = "invalid lighting mode"


class InvalidDirectionError(ValidationError):
    kind = "invalid direction"


class ProfileError(PredatorRGBError):
    def __init__(self, name: str, message: str) -> None:
        self.name = name
        super().__init__(message)


class ProfileNotFoundError(ProfileError):
    def __init__(self, name: str) -> None:
        super().__init__(name, f"profile not found: {name!r}")


class CorruptProfileError(ProfileError):
    def __init__(self, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(name, f"corrupt profile {name!r}: {reason}")


class ProfileWriteError(ProfileError):
    def __init__(self, name: str, reason: str) -> None:
        self.reason = reason
        super().__init__(name, f"cannot write profile {name!r}: {reason}")


class ProfileListError(ProfileError):
    def __init__(self, directory: str, reason: str) -> None:
        self.reason = reason
        super().__init__(directory, f"cannot list profiles in {directory}: {reason}")


class DeviceWriteError(PredatorRGBError):
    def __init__(self, device: str, frame_index: int, reason: str) -> None:
        self.device = device
        self.frame_index = frame_index
        self.reason = reason
        super().__init__(f"failed to write frame {frame_index} to {device}: {reason}")

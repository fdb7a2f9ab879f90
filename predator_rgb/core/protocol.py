"""Command frames for the acer-gkbbl character devices.

The acer-predator-turbo kernel module exposes two write-only nodes:

- the dynamic node takes 16-byte frames selecting the firmware effect
  (mode, speed, brightness, direction, colour);
- the static node takes 4-byte frames colouring a single zone.

Byte layout (dynamic frame):

    0      mode code
    1      speed 0..9
    2      brightness 0..100
    3      0x08 for wave, else 0
    4      direction code
    5..7   red, green, blue
    9      0x01 (apply)

Static frame: zone bit, red, green, blue.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from .config.paths import device_path, static_device_path
from .lighting import (
    BRIGHTNESS_MAX,
    SPEED_MAX,
    Direction,
    LightingConfiguration,
    LightingMode,
    ZoneMask,
)

DYNAMIC_FRAME_SIZE: Final[int] = 16
STATIC_FRAME_SIZE: Final[int] = 4

# Native brightness range of the controller.
NATIVE_BRIGHTNESS_MAX: Final[int] = 100

MODE_CODES: Final[dict[LightingMode, int]] = {
    LightingMode.STATIC: 0,
    LightingMode.BREATH: 1,
    LightingMode.NEON: 2,
    LightingMode.WAVE: 3,
    LightingMode.SHIFTING: 4,
    LightingMode.ZOOM: 5,
}

DIRECTION_CODES: Final[dict[Direction, int]] = {
    Direction.RIGHT_TO_LEFT: 1,
    Direction.LEFT_TO_RIGHT: 2,
}

WAVE_FLAG: Final[int] = 0x08
APPLY_FLAG: Final[int] = 0x01

_OFF_MODE = 0
_OFF_SPEED = 1
_OFF_BRIGHTNESS = 2
_OFF_WAVE = 3
_OFF_DIRECTION = 4
_OFF_RGB = 5
_OFF_APPLY = 9


class FrameTarget(str, Enum):
    DYNAMIC = "dynamic"
    STATIC = "static"

    @property
    def frame_size(self) -> int:
        return DYNAMIC_FRAME_SIZE if self is FrameTarget.DYNAMIC else STATIC_FRAME_SIZE

    def device(self) -> str:
        return device_path() if self is FrameTarget.DYNAMIC else static_device_path()


@dataclass(frozen=True)
class CommandFrame:
    target: FrameTarget
    payload: bytes

    def __post_init__(self) -> None:
        if len(self.payload) != self.target.frame_size:
            raise ValueError(
                f"{self.target.value} frame must be {self.target.frame_size} bytes, got {len(self.payload)}"
            )

    def hex(self) -> str:
        return "[" + ", ".join(f"{b:02X}" for b in self.payload) + "]"


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, int(value)))


def scale_brightness(percent: int) -> int:
    """Map a 0..100 percentage onto the controller's native brightness range."""

    p = _clamp(percent, 0, BRIGHTNESS_MAX)
    return int(round(p * NATIVE_BRIGHTNESS_MAX / BRIGHTNESS_MAX))


def _rgb(config: LightingConfiguration) -> tuple[int, int, int]:
    c = config.color
    return (_clamp(c.red, 0, 255), _clamp(c.green, 0, 255), _clamp(c.blue, 0, 255))


def _static_zone_frame(zone: int, rgb: tuple[int, int, int]) -> CommandFrame:
    payload = bytearray(STATIC_FRAME_SIZE)
    payload[0] = ZoneMask.zone_bit(zone)
    payload[1:4] = bytes(rgb)
    return CommandFrame(FrameTarget.STATIC, bytes(payload))


def _dynamic_frame(config: LightingConfiguration) -> CommandFrame:
    payload = bytearray(DYNAMIC_FRAME_SIZE)
    payload[_OFF_BRIGHTNESS] = scale_brightness(config.brightness)
    payload[_OFF_APPLY] = APPLY_FLAG

    if config.mode is not LightingMode.STATIC:
        payload[_OFF_MODE] = MODE_CODES[config.mode]
        payload[_OFF_SPEED] = _clamp(config.speed, 0, SPEED_MAX)
        payload[_OFF_WAVE] = WAVE_FLAG if config.mode is LightingMode.WAVE else 0
        payload[_OFF_DIRECTION] = DIRECTION_CODES[config.direction]
        payload[_OFF_RGB : _OFF_RGB + 3] = bytes(_rgb(config))

    return CommandFrame(FrameTarget.DYNAMIC, bytes(payload))


def encode(config: LightingConfiguration) -> list[CommandFrame]:
    """Encode a configuration into the ordered frames that apply it.

    Static mode colours each targeted zone on the static node first, then
    switches the dynamic node to the static effect. Every other mode is a
    single dynamic frame; zone selection does not apply to firmware effects.
    """

    frames: list[CommandFrame] = []
    if config.mode is LightingMode.STATIC:
        rgb = _rgb(config)
        for zone in config.zones.expanded():
            frames.append(_static_zone_frame(zone, rgb))
    frames.append(_dynamic_frame(config))
    return frames


def format_frame(frame: CommandFrame) -> str:
    return f"Device: {frame.target.device()}\nPayload: {frame.hex()}"

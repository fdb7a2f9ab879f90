"""Lighting configuration model.

A LightingConfiguration is built once per invocation (from flags, interactive
answers or a profile) and is immutable afterwards. `build_configuration` is the
only constructor callers use, so every path goes through the same checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final, Iterable, Union

from .colors import RGBColor
from .errors import InvalidBrightnessError, InvalidDirectionError, InvalidModeError, InvalidSpeedError, InvalidZoneError

ALL_ZONES: Final[int] = 0
ZONE_COUNT: Final[int] = 4

SPEED_MIN: Final[int] = 0
SPEED_MAX: Final[int] = 9
BRIGHTNESS_MIN: Final[int] = 0
BRIGHTNESS_MAX: Final[int] = 100


class LightingMode(str, Enum):
    STATIC = "static"
    BREATH = "breath"
    NEON = "neon"
    WAVE = "wave"
    SHIFTING = "shifting"
    ZOOM = "zoom"

    @classmethod
    def parse(cls, text: str) -> "LightingMode":
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise InvalidModeError(text, "choose one of: " + ", ".join(m.value for m in cls)) from None

    @property
    def is_directional(self) -> bool:
        return self in (LightingMode.WAVE, LightingMode.SHIFTING)

    def __str__(self) -> str:
        return self.value


class Direction(str, Enum):
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"

    @classmethod
    def parse(cls, text: str) -> "Direction":
        try:
            return cls(str(text).strip().lower())
        except ValueError:
            raise InvalidDirectionError(text, "choose left-to-right or right-to-left") from None

    def __str__(self) -> str:
        return self.value


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_speed(value: object) -> int:
    if not _is_int(value) or not SPEED_MIN <= value <= SPEED_MAX:  # type: ignore[operator]
        raise InvalidSpeedError(value, f"speed must be between {SPEED_MIN} and {SPEED_MAX}")
    return value  # type: ignore[return-value]


def validate_brightness(value: object) -> int:
    if not _is_int(value) or not BRIGHTNESS_MIN <= value <= BRIGHTNESS_MAX:  # type: ignore[operator]
        raise InvalidBrightnessError(value, f"brightness must be between {BRIGHTNESS_MIN} and {BRIGHTNESS_MAX}")
    return value  # type: ignore[return-value]


@dataclass(frozen=True)
class ZoneMask:
    """Targeted zones.

    `zones` is empty for the "all zones" selector, otherwise a sorted tuple of
    distinct zone indices in 1..4.
    """

    zones: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        for zone in self.zones:
            if not _is_int(zone) or not 1 <= zone <= ZONE_COUNT:
                raise InvalidZoneError(zone, f"zones are 0 (all) or 1-{ZONE_COUNT}")
        if tuple(sorted(set(self.zones))) != self.zones:
            raise InvalidZoneError(self.zones, "zones must be sorted and distinct")

    @classmethod
    def all(cls) -> "ZoneMask":
        return cls(())

    @classmethod
    def from_values(cls, values: Union[int, Iterable[int]]) -> "ZoneMask":
        if _is_int(values):
            values = [values]  # type: ignore[list-item]
        vals = list(values)  # type: ignore[arg-type]
        if not vals:
            raise InvalidZoneError(vals, "no zone given")

        for v in vals:
            if not _is_int(v) or not (v == ALL_ZONES or 1 <= v <= ZONE_COUNT):
                raise InvalidZoneError(v, f"zones are 0 (all) or 1-{ZONE_COUNT}")

        if ALL_ZONES in vals:
            if any(v != ALL_ZONES for v in vals):
                raise InvalidZoneError(vals, "0 (all zones) cannot be combined with individual zones")
            return cls.all()
        return cls(tuple(sorted(set(vals))))

    @classmethod
    def parse(cls, text: str) -> "ZoneMask":
        """Parse ``"0"`` or a comma-separated list such as ``"1,3"``."""

        items = [p.strip() for p in str(text).split(",")]
        values: list[int] = []
        for item in items:
            try:
                values.append(int(item))
            except ValueError:
                raise InvalidZoneError(text, "zones must be numbers separated by commas") from None
        return cls.from_values(values)

    @property
    def is_all(self) -> bool:
        return not self.zones

    def expanded(self) -> tuple[int, ...]:
        return tuple(range(1, ZONE_COUNT + 1)) if self.is_all else self.zones

    @staticmethod
    def zone_bit(zone: int) -> int:
        return 1 << (zone - 1)

    def __str__(self) -> str:
        return str(ALL_ZONES) if self.is_all else ",".join(str(z) for z in self.zones)


@dataclass(frozen=True)
class LightingConfiguration:
    mode: LightingMode
    zones: ZoneMask
    speed: int
    brightness: int
    color: RGBColor
    direction: Direction

    def __post_init__(self) -> None:
        if not isinstance(self.mode, LightingMode):
            raise InvalidModeError(self.mode)
        if not isinstance(self.direction, Direction):
            raise InvalidDirectionError(self.direction)
        if not isinstance(self.zones, ZoneMask):
            raise InvalidZoneError(self.zones, "expected a ZoneMask")
        if not isinstance(self.color, RGBColor):
            raise TypeError(f"color must be an RGBColor, got {type(self.color).__name__}")
        validate_speed(self.speed)
        validate_brightness(self.brightness)

    def describe(self) -> list[str]:
        zones = "all" if self.zones.is_all else ", ".join(f"Zone {z}" for z in self.zones.zones)
        return [
            f"Mode: {self.mode}",
            f"Zones: {zones}",
            f"Color: {self.color}",
            f"Speed: {self.speed}",
            f"Brightness: {self.brightness}%",
            f"Direction: {self.direction}",
        ]


def build_configuration(
    *,
    mode: Union[LightingMode, str],
    zones: Union[ZoneMask, int, Iterable[int], str],
    speed: int,
    brightness: int,
    color: RGBColor,
    direction: Union[Direction, str],
) -> LightingConfiguration:
    """Validate raw field values and build a LightingConfiguration."""

    if not isinstance(mode, LightingMode):
        mode = LightingMode.parse(mode)
    if not isinstance(direction, Direction):
        direction = Direction.parse(direction)

    if isinstance(zones, str):
        zone_mask = ZoneMask.parse(zones)
    elif isinstance(zones, ZoneMask):
        zone_mask = zones
    else:
        zone_mask = ZoneMask.from_values(zones)

    return LightingConfiguration(
        mode=mode,
        zones=zone_mask,
        speed=speed,
        brightness=brightness,
        color=color,
        direction=direction,
    )

#!/usr/bin/env python3
"""Unit tests for the lighting configuration model (core/lighting.py).

Covers range validation, zone masks and the boundary enum parsers.
"""

from __future__ import annotations

import pytest

from predator_rgb.core.colors import RGBColor
from predator_rgb.core.errors import (
    InvalidBrightnessError,
    InvalidDirectionError,
    InvalidModeError,
    InvalidSpeedError,
    InvalidZoneError,
)
from predator_rgb.core.lighting import (
    Direction,
    LightingConfiguration,
    LightingMode,
    ZoneMask,
    build_configuration,
)


class TestZoneMask:
    """Test zone selection parsing and expansion."""

    def test_zero_is_all_zones(self):
        """Zone 0 should select every zone."""
        mask = ZoneMask.from_values(0)
        assert mask.is_all
        assert mask.expanded() == (1, 2, 3, 4)
        assert str(mask) == "0"

    @pytest.mark.parametrize("zone", [1, 2, 3, 4])
    def test_single_zone_masks(self, zone):
        """A single zone should expand to itself."""
        mask = ZoneMask.from_values(zone)
        assert not mask.is_all
        assert mask.expanded() == (zone,)

    @pytest.mark.parametrize("zone", [5, -1, 100])
    def test_out_of_range_zone_fails(self, zone):
        """Zones outside 0..4 should be rejected."""
        with pytest.raises(InvalidZoneError):
            ZoneMask.from_values(zone)

    def test_all_cannot_be_combined(self):
        """0 should not be combined with individual zones."""
        with pytest.raises(InvalidZoneError):
            ZoneMask.from_values([0, 2])

    def test_multiple_zones_sorted_and_deduplicated(self):
        """Zone lists should be sorted and deduplicated."""
        mask = ZoneMask.from_values([3, 1, 3])
        assert mask.zones == (1, 3)
        assert str(mask) == "1,3"

    @pytest.mark.parametrize("zone,bit", [(1, 0x01), (2, 0x02), (3, 0x04), (4, 0x08)])
    def test_zone_bit_matches_static_frame_selector(self, zone, bit):
        """zone_bit should give the static frame selector bit."""
        assert ZoneMask.zone_bit(zone) == bit

    def test_parse_text(self):
        """Comma-separated text should parse with surrounding spaces."""
        assert ZoneMask.parse("0").is_all
        assert ZoneMask.parse(" 2 , 4 ").zones == (2, 4)

    @pytest.mark.parametrize("text", ["", "a", "1,,2", "1;2", "5"])
    def test_parse_rejects_garbage(self, text):
        """Non-numeric or malformed zone text should be rejected."""
        with pytest.raises(InvalidZoneError):
            ZoneMask.parse(text)

    def test_empty_value_list_fails(self):
        """An empty zone list should be rejected."""
        with pytest.raises(InvalidZoneError):
            ZoneMask.from_values([])

    def test_direct_construction_validates(self):
        """Direct construction should enforce the same rules."""
        with pytest.raises(InvalidZoneError):
            ZoneMask((0,))
        with pytest.raises(InvalidZoneError):
            ZoneMask((2, 1))


class TestEnums:
    """Test mode and direction parsing."""

    def test_mode_parse_is_case_insensitive(self):
        """Mode names should parse case-insensitively."""
        assert LightingMode.parse("WAVE") is LightingMode.WAVE
        assert LightingMode.parse(" zoom ") is LightingMode.ZOOM

    def test_mode_parse_rejects_unknown(self):
        """Unknown mode names should be rejected."""
        with pytest.raises(InvalidModeError):
            LightingMode.parse("rainbow")

    def test_direction_parse(self):
        """Directions should parse case-insensitively and reject unknowns."""
        assert Direction.parse("Right-To-Left") is Direction.RIGHT_TO_LEFT
        with pytest.raises(InvalidDirectionError):
            Direction.parse("up")

    def test_directional_modes(self):
        """Only wave and shifting should be directional."""
        assert LightingMode.WAVE.is_directional
        assert LightingMode.SHIFTING.is_directional
        assert not LightingMode.STATIC.is_directional


class TestConfigurationRanges:
    """Test speed and brightness ranges."""

    @pytest.mark.parametrize("speed", [0, 4, 9])
    def test_speed_boundaries_accepted(self, make_config, speed):
        """Speeds 0..9 should be accepted."""
        assert make_config(speed=speed).speed == speed

    @pytest.mark.parametrize("speed", [-1, 10, 255])
    def test_speed_out_of_range_rejected(self, make_config, speed):
        """Speeds outside 0..9 should be rejected with the value."""
        with pytest.raises(InvalidSpeedError) as info:
            make_config(speed=speed)
        assert info.value.value == speed

    @pytest.mark.parametrize("brightness", [0, 50, 100])
    def test_brightness_boundaries_accepted(self, make_config, brightness):
        """Brightness 0..100 should be accepted."""
        assert make_config(brightness=brightness).brightness == brightness

    @pytest.mark.parametrize("brightness", [-1, 101, 1000])
    def test_brightness_out_of_range_rejected(self, make_config, brightness):
        """Brightness outside 0..100 should be rejected."""
        with pytest.raises(InvalidBrightnessError):
            make_config(brightness=brightness)

    def test_non_integer_values_rejected(self, make_config):
        """Strings and booleans should not pass as integers."""
        with pytest.raises(InvalidSpeedError):
            make_config(speed="4")
        with pytest.raises(InvalidBrightnessError):
            make_config(brightness=True)

    def test_mode_must_be_enum(self, make_config):
        """A raw mode string should be rejected by the dataclass."""
        with pytest.raises(InvalidModeError):
            make_config(mode="static")

    def test_configuration_is_immutable(self, make_config):
        """LightingConfiguration should be frozen."""
        cfg = make_config()
        with pytest.raises(Exception):
            cfg.speed = 1  # type: ignore[misc]


class TestBuildConfiguration:
    """Test building configurations from raw values."""

    def test_builds_from_raw_values(self):
        """Raw strings should be parsed into the typed configuration."""
        cfg = build_configuration(
            mode="wave",
            zones="1,2",
            speed=9,
            brightness=0,
            color=RGBColor(1, 2, 3),
            direction="right-to-left",
        )
        assert cfg == LightingConfiguration(
            mode=LightingMode.WAVE,
            zones=ZoneMask((1, 2)),
            speed=9,
            brightness=0,
            color=RGBColor(1, 2, 3),
            direction=Direction.RIGHT_TO_LEFT,
        )

    def test_accepts_zone_int(self):
        """An integer zone should be accepted."""
        cfg = build_configuration(
            mode=LightingMode.STATIC,
            zones=0,
            speed=4,
            brightness=100,
            color=RGBColor(0, 0, 0),
            direction=Direction.LEFT_TO_RIGHT,
        )
        assert cfg.zones.is_all

    def test_describe_lists_every_field(self, make_config):
        """describe should list one line per field."""
        lines = make_config(zones=ZoneMask((2,))).describe()
        assert lines == [
            "Mode: static",
            "Zones: Zone 2",
            "Color: RGB(240, 48, 32)",
            "Speed: 4",
            "Brightness: 100%",
            "Direction: left-to-right",
        ]

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest

from predator_rgb.core.colors import RGBColor
from predator_rgb.core.lighting import Direction, LightingConfiguration, LightingMode, ZoneMask
from predator_rgb.tests.fakes import FakeTransport


def _hardware_opted_in() -> bool:
    return os.environ.get("PREDATOR_RGB_ALLOW_HARDWARE") == "1"


# Safety default: during pytest, avoid touching the user's real profiles and
# never point the transport at the real acer-gkbbl nodes.
if not _hardware_opted_in():
    _sandbox = Path(tempfile.mkdtemp(prefix="predator-rgb-test-"))
    os.environ.setdefault("PREDATOR_RGB_CONFIG_DIR", str(_sandbox / "config"))
    os.environ.setdefault("PREDATOR_RGB_DEVICE", str(_sandbox / "dev" / "acer-gkbbl-0"))
    os.environ.setdefault("PREDATOR_RGB_STATIC_DEVICE", str(_sandbox / "dev" / "acer-gkbbl-static-0"))


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def make_config():
    """Factory for configurations with the CLI defaults and per-test overrides."""

    def _make(**overrides) -> LightingConfiguration:
        fields = {
            "mode": LightingMode.STATIC,
            "zones": ZoneMask.all(),
            "speed": 4,
            "brightness": 100,
            "color": RGBColor(240, 48, 32),
            "direction": Direction.LEFT_TO_RIGHT,
        }
        fields.update(overrides)
        return LightingConfiguration(**fields)

    return _make


@pytest.fixture
def profile_root(tmp_path: Path) -> Path:
    return tmp_path / "profiles"

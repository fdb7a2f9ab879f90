"""predator-rgb: keyboard backlight control for Acer Predator/Helios laptops."""

from __future__ import annotations

__version__ = "0.3.0"

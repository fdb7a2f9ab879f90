"""Terminal preview of the targeted zones using 24-bit ANSI background colours."""

from __future__ import annotations

from .colors import RGBColor
from .lighting import ZONE_COUNT, ZoneMask

_RESET = "\x1b[0m"


def color_block(color: RGBColor) -> str:
    return f"\x1b[48;2;{color.red};{color.green};{color.blue}m {_RESET}"


def render_zone_preview(zones: ZoneMask, color: RGBColor) -> str:
    targeted = set(zones.expanded())
    block = color_block(color)

    labels = []
    bar = []
    for zone in range(1, ZONE_COUNT + 1):
        if zone in targeted:
            labels.append(f"Zone {zone}: {block}")
            bar.append(block * 2)
        else:
            labels.append(f"Zone {zone}: [-]")
            bar.append("  ")

    return "Preview (colored blocks):\n" + "\t".join(labels) + "\n\n" + " ".join(bar) + "\n"

"""Prompt-driven configuration entry.

A straight sequence of questions. Each answer is parsed with the same helpers
the flag path uses and re-asked until it parses; the collected values go
through `build_configuration` like everything else.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Callable, Optional, TextIO, TypeVar

from ..core.colors import RGBColor, parse_color
from ..core.config.defaults import DEFAULTS
from ..core.lighting import (
    Direction,
    LightingConfiguration,
    LightingMode,
    ZoneMask,
    build_configuration,
    validate_brightness,
    validate_speed,
)
from ..core.preview import render_zone_preview

T = TypeVar("T")

Ask = Callable[[str], str]


@dataclass(frozen=True)
class InteractiveResult:
    config: LightingConfiguration
    dry_run: bool


def parse_confirmation(text: str) -> bool:
    answer = text.strip().lower()
    if answer in ("y", "yes"):
        return True
    if answer in ("n", "no"):
        return False
    raise ValueError("Invalid input, please enter 'Y' or 'N'.")


def parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        raise ValueError(f"{text.strip()!r} is not a number.") from None


def prompt_with_retry(
    message: str,
    default: str,
    parse_fn: Callable[[str], T],
    *,
    ask: Ask = input,
    err: Optional[TextIO] = None,
) -> T:
    while True:
        raw = ask(f"{message} [{default}]: ").strip()
        try:
            return parse_fn(raw or default)
        except ValueError as exc:
            print(exc, file=err or sys.stderr)


def _gather(
    previous: Optional[InteractiveResult],
    *,
    ask: Ask,
    out: TextIO,
    err: Optional[TextIO],
) -> InteractiveResult:
    prev = previous.config if previous is not None else None
    r, g, b = DEFAULTS["color"]
    default_color = prev.color if prev is not None else RGBColor(r, g, b)

    mode = prompt_with_retry(
        "Choose lighting mode (" + ", ".join(m.value for m in LightingMode) + ")",
        prev.mode.value if prev else DEFAULTS["mode"],
        LightingMode.parse,
        ask=ask,
        err=err,
    )
    zones = prompt_with_retry(
        "Specify zones (0 for all, or comma-separated for specific zones)",
        str(prev.zones) if prev else DEFAULTS["zones"],
        ZoneMask.parse,
        ask=ask,
        err=err,
    )

    speed = prev.speed if prev else DEFAULTS["speed"]
    brightness = prev.brightness if prev else DEFAULTS["brightness"]
    direction = prev.direction if prev else Direction.parse(DEFAULTS["direction"])
    if mode is not LightingMode.STATIC:
        speed = prompt_with_retry(
            "Lighting speed (0-9)",
            str(speed),
            lambda s: validate_speed(parse_int(s)),
            ask=ask,
            err=err,
        )
        brightness = prompt_with_retry(
            "Brightness (0-100)",
            str(brightness),
            lambda s: validate_brightness(parse_int(s)),
            ask=ask,
            err=err,
        )
        direction = prompt_with_retry(
            "Direction (left-to-right or right-to-left)",
            direction.value,
            Direction.parse,
            ask=ask,
            err=err,
        )

    color = prompt_with_retry(
        "Specify color (#rrggbb, #rgb, rrggbb, or r,g,b)",
        f"{default_color.red},{default_color.green},{default_color.blue}",
        parse_color,
        ask=ask,
        err=err,
    )
    dry_run = prompt_with_retry(
        "Dry run (print frames, do not write)? (y/N)",
        "Y" if previous is not None and previous.dry_run else "N",
        parse_confirmation,
        ask=ask,
        err=err,
    )

    if mode is LightingMode.STATIC:
        print(render_zone_preview(zones, color), file=out)

    config = build_configuration(
        mode=mode,
        zones=zones,
        speed=speed,
        brightness=brightness,
        color=color,
        direction=direction,
    )
    return InteractiveResult(config=config, dry_run=dry_run)


def interactive_mode(
    *,
    ask: Ask = input,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> InteractiveResult:
    """Ask for every field until the user confirms the result."""

    out = out or sys.stdout
    result: Optional[InteractiveResult] = None
    while True:
        result = _gather(result, ask=ask, out=out, err=err)

        print("\nHere are the selected settings:", file=out)
        for line in result.config.describe():
            print(line, file=out)

        if prompt_with_retry("Apply these settings? (Y/n)", "Y", parse_confirmation, ask=ask, err=err):
            return result
        print("Let's try again!", file=out)

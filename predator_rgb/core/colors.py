"""Colour parsing.

Accepted forms, checked in this order (first match wins):
- ``#rrggbb``
- ``#rgb`` (each digit doubled, ``#f08`` -> ``#ff0088``)
- ``rrggbb``
- ``r,g,b`` (decimal, each 0..255)
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final, Optional

from .errors import InvalidColorError

_HEX6_HASH: Final = re.compile(r"#([0-9a-fA-F]{6})")
_HEX3_HASH: Final = re.compile(r"#([0-9a-fA-F]{3})")
_HEX6_BARE: Final = re.compile(r"([0-9a-fA-F]{6})")
_DECIMAL_COMPONENT: Final = re.compile(r"\s*([0-9]{1,3})\s*")

CHANNEL_MAX: Final[int] = 255


def _check_channel(value: object, text: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidColorError(text, "components must be integers")
    if not 0 <= value <= CHANNEL_MAX:
        raise InvalidColorError(text, f"components must be between 0 and {CHANNEL_MAX}")
    return value


@dataclass(frozen=True)
class RGBColor:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        raw = (self.red, self.green, self.blue)
        for value in raw:
            _check_channel(value, raw)

    @property
    def hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"

    def to_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_bytes(self) -> bytes:
        return bytes(self.to_tuple())

    def __str__(self) -> str:
        return f"RGB({self.red}, {self.green}, {self.blue})"


def _from_hex6(digits: str) -> RGBColor:
    return RGBColor(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def _from_decimal(text: str, original: str) -> RGBColor:
    parts = text.split(",")
    if len(parts) != 3:
        raise InvalidColorError(original, "r,g,b needs exactly 3 components")

    values: list[int] = []
    for part in parts:
        m = _DECIMAL_COMPONENT.fullmatch(part)
        if m is None:
            raise InvalidColorError(original, f"component {part.strip()!r} is not a number")
        values.append(_check_channel(int(m.group(1)), original))
    return RGBColor(*values)


def parse_color(text: str) -> RGBColor:
    """Parse a colour string into an RGBColor.

    Raises InvalidColorError carrying the original string on any failure.
    """

    if not isinstance(text, str):
        raise InvalidColorError(text, "expected a string")

    s = text.strip()
    if not s:
        raise InvalidColorError(text, "empty input")

    m = _HEX6_HASH.fullmatch(s)
    if m:
        return _from_hex6(m.group(1))

    m = _HEX3_HASH.fullmatch(s)
    if m:
        return _from_hex6("".join(ch * 2 for ch in m.group(1)))

    m = _HEX6_BARE.fullmatch(s)
    if m:
        return _from_hex6(m.group(1))

    if "," in s:
        return _from_decimal(s, text)

    if s.startswith("#"):
        raise InvalidColorError(text, "hex colour must have 3 or 6 hex digits")
    raise InvalidColorError(text, "use #rrggbb, #rgb, rrggbb or r,g,b")


def resolve_color(color_text: Optional[str], red: int, green: int, blue: int) -> RGBColor:
    """Pick the combined colour string when given, else the individual channels."""

    if color_text is not None:
        return parse_color(color_text)
    return RGBColor(red, green, blue)

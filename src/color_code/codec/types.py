# color_code/codec/types.py
"""
types.py.

Does: Define the code-family enum, the normalized color value, the parse
      result pair and the direct hex constructor.
Used By: Parser, formatter, keyword table, CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import NamedTuple

import webcolors

from color_code.errors import UnknownCodeTypeError

__all__ = [
    "MAX_HEX",
    "RGB",
    "ColorCodeType",
    "NormalizedColor",
    "ParseResult",
    "color_from_hex",
    "unpack_hex",
]
__docformat__ = "google"

MAX_HEX = 0xFFFFFF

RGB = tuple[int, int, int]


class ColorCodeType(Enum):
    """Syntactic color-code families. Values are the public tags."""

    INVALID = "invalid"
    HEX = "hex"  # #ffffff
    SHORT_HEX = "shortHex"  # #fff
    CSS_RGB = "cssRGB"  # rgb(255,255,255)
    CSS_RGBA = "cssRGBa"  # rgba(255,255,255,1)
    CSS_HSL = "cssHSL"  # hsl(0,0%,100%)
    CSS_HSLA = "cssHSLa"  # hsla(0,0%,100%,1)
    CSS_KEYWORD = "cssKeyword"  # White

    @classmethod
    def from_tag(cls, tag: str) -> ColorCodeType:
        """Does: Resolve a tag such as "shortHex" or "SHORT_HEX" (case-insensitive)."""
        key = tag.strip().lower()
        for member in cls:
            if key in (member.value.lower(), member.name.lower()):
                return member
        raise UnknownCodeTypeError(
            f"Unknown color code type {tag!r}; expected one of: "
            + ", ".join(m.value for m in cls)
        )

    @classmethod
    def tags(cls) -> list[str]:
        return [m.value for m in cls]


def _clamp_channel(v: int) -> int:
    return max(0, min(255, v))


@dataclass(frozen=True)
class NormalizedColor:
    """
    An RGB color with 0–255 integer channels and a 0–1 alpha.

    Channels are kept exactly as produced by the parser (``rgb(300,0,0)``
    keeps ``red=300``); clamping happens on readback in the formatter and in
    :attr:`hex_value`.
    """

    red: int
    green: int
    blue: int
    alpha: float = 1.0

    @property
    def rgb(self) -> RGB:
        return (self.red, self.green, self.blue)

    @property
    def clamped_rgb(self) -> webcolors.IntegerRGB:
        return webcolors.IntegerRGB(*(_clamp_channel(c) for c in self.rgb))

    @property
    def hex_value(self) -> int:
        """Packed 24-bit integer of the clamped channels."""
        r, g, b = self.clamped_rgb
        return (r << 16) | (g << 8) | b

    def with_alpha(self, alpha: float) -> NormalizedColor:
        return replace(self, alpha=alpha)


class ParseResult(NamedTuple):
    """Detected family plus the color; ``color`` is None for INVALID."""

    code_type: ColorCodeType
    color: NormalizedColor | None

    def __bool__(self) -> bool:
        return self.color is not None

    @classmethod
    def invalid(cls) -> ParseResult:
        return cls(ColorCodeType.INVALID, None)


def unpack_hex(value: int, alpha: float = 1.0) -> NormalizedColor:
    """Does: Split a packed 0xRRGGBB integer into channels (no range check)."""
    return NormalizedColor(
        red=(value & 0xFF0000) >> 16,
        green=(value & 0x00FF00) >> 8,
        blue=value & 0x0000FF,
        alpha=alpha,
    )


def color_from_hex(value: int, alpha: float = 1.0) -> NormalizedColor | None:
    """
    Build a color from a packed 24-bit integer such as ``0xFF0000``.

    Returns None when ``value`` is not an integer in ``[0, 0xFFFFFF]``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    if not 0 <= value <= MAX_HEX:
        return None
    return unpack_hex(value, alpha)

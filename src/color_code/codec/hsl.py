# color_code/codec/hsl.py
"""
hsl.py.

Does: Lightness-based HSL <-> 0–255 RGB conversion on top of `colorsys`
      (which orders the triple as H, L, S), plus the half-away-from-zero
      rounding used by every channel readback.
"""

from __future__ import annotations

import colorsys
import math

from .types import RGB

__all__ = ["round_half_away", "hsl_to_rgb", "rgb_to_hsl"]


def round_half_away(x: float) -> int:
    """Does: Round to nearest int, ties away from zero (2.5 -> 3, not 2)."""
    return int(math.copysign(math.floor(abs(x) + 0.5), x))


def _unit(x: float) -> float:
    return max(0.0, min(1.0, x))


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> RGB:
    """
    Convert HSL fractions to integer channels.

    Hue wraps modulo 1; saturation and lightness are clamped to [0, 1].
    """
    r, g, b = colorsys.hls_to_rgb(hue % 1.0, _unit(lightness), _unit(saturation))
    return (
        round_half_away(255 * r),
        round_half_away(255 * g),
        round_half_away(255 * b),
    )


def rgb_to_hsl(rgb: RGB) -> tuple[float, float, float]:
    """Convert 0–255 channels to (hue, saturation, lightness) fractions."""
    r, g, b = (c / 255 for c in rgb)
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    return h, s, l

# color_code/codec/formatter.py
"""
formatter.py.

Does: Render a NormalizedColor as a string of a requested code family.
Returns: The code string, or None when the family cannot represent the
         color (unnamed color as cssKeyword) or the family is INVALID.
Used By: CLI, `convert`, round-trip callers.
"""

from __future__ import annotations

import logging

import webcolors

from .hsl import rgb_to_hsl, round_half_away
from .keywords import keyword_for_hex
from .parser import parse
from .types import ColorCodeType, NormalizedColor

__all__ = ["format_color", "format_all", "convert", "format_alpha"]
__docformat__ = "google"

logger = logging.getLogger(__name__)


def format_alpha(alpha: float) -> str:
    """Does: Shortest general form, locale-free ("1", "0.5", "0.333333")."""
    return format(alpha, "g")


def _hsl_parts(color: NormalizedColor) -> tuple[int, int, int]:
    hue, saturation, lightness = rgb_to_hsl(color.clamped_rgb)
    h = round_half_away(360 * hue) if saturation > 0 else 0
    return h, round_half_away(100 * saturation), round_half_away(100 * lightness)


def format_color(
    color: NormalizedColor,
    code_type: ColorCodeType,
    *,
    debug: bool = False,
) -> str | None:
    """
    Format ``color`` as ``code_type``.

    Channels are clamped to 0–255 before rendering. ``SHORT_HEX`` truncates
    each channel to its high nibble, so it is lossy.
    """
    if not isinstance(code_type, ColorCodeType):
        raise TypeError(f"code_type must be ColorCodeType, got {type(code_type).__name__}")

    r, g, b = color.clamped_rgb
    alpha = color.alpha
    out: str | None

    if code_type is ColorCodeType.HEX:
        out = webcolors.rgb_to_hex((r, g, b))
    elif code_type is ColorCodeType.SHORT_HEX:
        out = f"#{r // 16:1x}{g // 16:1x}{b // 16:1x}"
    elif code_type is ColorCodeType.CSS_RGB:
        out = f"rgb({r},{g},{b})"
    elif code_type is ColorCodeType.CSS_RGBA:
        out = f"rgba({r},{g},{b},{format_alpha(alpha)})"
    elif code_type is ColorCodeType.CSS_HSL:
        h, s, l = _hsl_parts(color)
        out = f"hsl({h},{s}%,{l}%)"
    elif code_type is ColorCodeType.CSS_HSLA:
        h, s, l = _hsl_parts(color)
        out = f"hsla({h},{s}%,{l}%,{format_alpha(alpha)})"
    elif code_type is ColorCodeType.CSS_KEYWORD:
        out = keyword_for_hex(color.hex_value)
    else:
        out = None

    if debug and logger.isEnabledFor(logging.DEBUG):
        logger.debug("[FORMAT %s] %s -> %r", code_type.value, color, out)
    return out


def format_all(color: NormalizedColor) -> dict[ColorCodeType, str]:
    """Does: Render every family that yields a string for ``color``."""
    rendered: dict[ColorCodeType, str] = {}
    for code_type in ColorCodeType:
        out = format_color(color, code_type)
        if out is not None:
            rendered[code_type] = out
    return rendered


def convert(code: str, code_type: ColorCodeType, *, debug: bool = False) -> str | None:
    """Does: Parse ``code`` and re-render it as ``code_type``; None if either step fails."""
    result = parse(code, debug=debug)
    if result.color is None:
        return None
    return format_color(result.color, code_type, debug=debug)

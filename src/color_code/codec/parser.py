# color_code/codec/parser.py
"""
parser.py.

Does: Classify a color-code string into exactly one family and convert its
      fields into a NormalizedColor.
Returns: ParseResult(code_type, color); INVALID/None on any failure.
Used By: CLI, `convert`, and callers reading user-supplied color codes.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Iterable

import webcolors

from .hsl import hsl_to_rgb, round_half_away
from .keywords import hex_for_keyword
from .types import ColorCodeType, NormalizedColor, ParseResult, unpack_hex

__all__ = ["parse", "parse_many", "detect_code_type"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Grammars (full-match; one per family) ────────────────────────────────────
_SEP = r"\s*,\s*"
_INT3 = r"([0-9]{1,3})"
_DEC = r"([0-9.]+)"

_GRAMMARS: tuple[tuple[ColorCodeType, re.Pattern[str]], ...] = (
    (ColorCodeType.HEX, re.compile(r"#[0-9a-fA-F]{6}")),
    (ColorCodeType.SHORT_HEX, re.compile(r"#[0-9a-fA-F]{3}")),
    (
        ColorCodeType.CSS_RGB,
        re.compile(rf"rgb\(\s*{_INT3}{_SEP}{_INT3}{_SEP}{_INT3}\s*\)"),
    ),
    (
        ColorCodeType.CSS_RGBA,
        re.compile(rf"rgba\(\s*{_INT3}{_SEP}{_INT3}{_SEP}{_INT3}{_SEP}{_DEC}\s*\)"),
    ),
    (
        ColorCodeType.CSS_HSL,
        re.compile(rf"hsl\(\s*{_INT3}{_SEP}{_DEC}%{_SEP}{_DEC}%\s*\)"),
    ),
    (
        ColorCodeType.CSS_HSLA,
        re.compile(rf"hsla\(\s*{_INT3}{_SEP}{_DEC}%{_SEP}{_DEC}%{_SEP}{_DEC}\s*\)"),
    ),
    (ColorCodeType.CSS_KEYWORD, re.compile(r"[a-zA-Z]+")),
)


# ── Numeric field helpers ────────────────────────────────────────────────────
def _to_float(raw: str | None, default: float) -> float:
    """Parse a decimal field; malformed ("1.2.3") or non-finite -> default."""
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if math.isfinite(value) else default


def _to_int(raw: str | None) -> int:
    """Parse an integer field; the grammar only captures digits, so the 0 fallback is defensive."""
    try:
        return int(raw) if raw is not None else 0
    except ValueError:
        return 0


def _alpha(m: re.Match[str], group: int) -> float:
    return _to_float(m.group(group), 1.0)


# ── Per-family converters ────────────────────────────────────────────────────
def _from_hex(code: str, m: re.Match[str]) -> NormalizedColor | None:
    return NormalizedColor(*webcolors.hex_to_rgb(code))


def _from_short_hex(code: str, m: re.Match[str]) -> NormalizedColor | None:
    nibbles = (int(ch, 16) for ch in code[1:])
    r, g, b = (round_half_away(n * 255 / 15) for n in nibbles)
    return NormalizedColor(r, g, b)


def _from_rgb(code: str, m: re.Match[str]) -> NormalizedColor | None:
    r, g, b = (_to_int(m.group(i)) for i in (1, 2, 3))
    return NormalizedColor(r, g, b)


def _from_rgba(code: str, m: re.Match[str]) -> NormalizedColor | None:
    r, g, b = (_to_int(m.group(i)) for i in (1, 2, 3))
    return NormalizedColor(r, g, b, _alpha(m, 4))


def _hsl_fields(m: re.Match[str]) -> tuple[int, int, int]:
    hue = _to_float(m.group(1), 0.0) / 360
    saturation = _to_float(m.group(2), 0.0) / 100
    lightness = _to_float(m.group(3), 0.0) / 100
    return hsl_to_rgb(hue, saturation, lightness)


def _from_hsl(code: str, m: re.Match[str]) -> NormalizedColor | None:
    return NormalizedColor(*_hsl_fields(m))


def _from_hsla(code: str, m: re.Match[str]) -> NormalizedColor | None:
    return NormalizedColor(*_hsl_fields(m), alpha=_alpha(m, 4))


def _from_keyword(code: str, m: re.Match[str]) -> NormalizedColor | None:
    hx = hex_for_keyword(code.lower())
    return unpack_hex(hx) if hx is not None else None


_CONVERTERS: dict[ColorCodeType, Callable[[str, re.Match[str]], NormalizedColor | None]] = {
    ColorCodeType.HEX: _from_hex,
    ColorCodeType.SHORT_HEX: _from_short_hex,
    ColorCodeType.CSS_RGB: _from_rgb,
    ColorCodeType.CSS_RGBA: _from_rgba,
    ColorCodeType.CSS_HSL: _from_hsl,
    ColorCodeType.CSS_HSLA: _from_hsla,
    ColorCodeType.CSS_KEYWORD: _from_keyword,
}


# ── Classification ───────────────────────────────────────────────────────────
def _classify(code: str) -> tuple[ColorCodeType, re.Match[str]] | None:
    """
    Does: Try every grammar and keep the result only when exactly one
          family matches the whole string.
    """
    hits = [
        (code_type, m)
        for code_type, pattern in _GRAMMARS
        if (m := pattern.fullmatch(code)) is not None
    ]
    if len(hits) != 1:
        return None
    return hits[0]


# ── Public API ───────────────────────────────────────────────────────────────
def parse(code: str, *, debug: bool = False) -> ParseResult:
    """
    Parse a CSS3-style color code.

    Hex digits and keywords are case-insensitive; surrounding whitespace is
    ignored. Unknown keywords are reported as INVALID even though they match
    the letters-only grammar.

    Example:
        >>> parse("hsla(0,0%,100%,0.5)")
        ParseResult(code_type=<ColorCodeType.CSS_HSLA: 'cssHSLa'>, color=NormalizedColor(red=255, green=255, blue=255, alpha=0.5))
    """
    trimmed = code.strip()
    hit = _classify(trimmed)
    if hit is None:
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[NO FAMILY] %r", trimmed)
        return ParseResult.invalid()

    code_type, match = hit
    color = _CONVERTERS[code_type](trimmed, match)
    if color is None:
        if debug and logger.isEnabledFor(logging.DEBUG):
            logger.debug("[UNKNOWN %s] %r", code_type.value, trimmed)
        return ParseResult.invalid()

    if debug and logger.isEnabledFor(logging.DEBUG):
        logger.debug("[%s] %r -> %s", code_type.value, trimmed, color)
    return ParseResult(code_type, color)


def parse_many(codes: Iterable[str], *, debug: bool = False) -> list[ParseResult]:
    """Does: Parse each code independently, preserving input order."""
    return [parse(c, debug=debug) for c in codes]


def detect_code_type(code: str) -> ColorCodeType:
    """Does: Return only the family tag `parse` would report."""
    return parse(code).code_type

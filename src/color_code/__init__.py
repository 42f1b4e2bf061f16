"""
color_code
==========

Does: Convert CSS3-style color codes (hex, short hex, rgb/rgba, hsl/hsla,
      keywords) to normalized RGB(+alpha) colors and back.
Returns: The public API re-exported from `color_code.codec`.
Used by: The `colorcode` CLI and any caller needing color-code round-trips.
"""

from .codec import (
    ColorCodeType,
    NormalizedColor,
    ParseResult,
    color_from_hex,
    convert,
    detect_code_type,
    format_all,
    format_color,
    hex_for_keyword,
    keyword_for_hex,
    parse,
    parse_many,
    stylesheet_keyword_colors,
    suggest_keywords,
)
from .errors import ColorCodeError, SettingsError, UnknownCodeTypeError

__all__ = [
    # model
    "ColorCodeType",
    "NormalizedColor",
    "ParseResult",
    "color_from_hex",
    # parse / format
    "parse",
    "parse_many",
    "detect_code_type",
    "format_color",
    "format_all",
    "convert",
    # keywords
    "hex_for_keyword",
    "keyword_for_hex",
    "stylesheet_keyword_colors",
    "suggest_keywords",
    # errors
    "ColorCodeError",
    "UnknownCodeTypeError",
    "SettingsError",
]
__docformat__ = "google"

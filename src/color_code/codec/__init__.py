"""
codec package.
=============

Does: Parse CSS3 color codes into NormalizedColor values and format them back.
Returns: Public API via parse/format_color plus the keyword-table accessors.
"""

from .formatter import convert, format_all, format_color
from .keywords import (
    KEYWORD_COLORS,
    hex_for_keyword,
    keyword_for_hex,
    keyword_names,
    stylesheet_keyword_colors,
)
from .parser import detect_code_type, parse, parse_many
from .suggest import suggest_keywords
from .types import ColorCodeType, NormalizedColor, ParseResult, color_from_hex

__all__ = [
    # types
    "ColorCodeType",
    "NormalizedColor",
    "ParseResult",
    "color_from_hex",
    # parse
    "parse",
    "parse_many",
    "detect_code_type",
    # format
    "format_color",
    "format_all",
    "convert",
    # keywords
    "KEYWORD_COLORS",
    "hex_for_keyword",
    "keyword_for_hex",
    "keyword_names",
    "stylesheet_keyword_colors",
    "suggest_keywords",
]

__docformat__ = "google"

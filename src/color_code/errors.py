"""
errors.py.

Does: Exception hierarchy for programmer and configuration mistakes.
Parsing and formatting never raise these; they report failure as data.
"""

from __future__ import annotations

__all__ = ["ColorCodeError", "UnknownCodeTypeError", "SettingsError"]


class ColorCodeError(Exception):
    """Base class for all color_code errors."""


class UnknownCodeTypeError(ColorCodeError, ValueError):
    """Raise when a code-type tag does not name a known family."""


class SettingsError(ColorCodeError, ValueError):
    """Raise when colorcode.json holds a value of the wrong kind or range."""

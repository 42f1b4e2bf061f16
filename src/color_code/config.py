"""
config.py.

Does: Read optional user settings from <data dir>/colorcode.json.
Returns: A frozen Settings; defaults when no data dir or file is configured.
Used by: The colorcode CLI (default output family, suggestion tuning).

Example colorcode.json:
    {"default_format": "cssRGBa", "suggestion_limit": 5, "suggestion_cutoff": 70}
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from color_code.codec.suggest import DEFAULT_CUTOFF, DEFAULT_LIMIT
from color_code.codec.types import ColorCodeType
from color_code.errors import SettingsError, UnknownCodeTypeError
from color_code.utils import (
    ConfigFileNotFound,
    DataDirNotFound,
    debug,
    load_config,
)

__all__ = ["Settings", "SETTINGS_FILE", "get_settings", "settings_from_dict"]

SETTINGS_FILE = "colorcode"
_KNOWN_KEYS = frozenset({"default_format", "suggestion_limit", "suggestion_cutoff"})


@dataclass(frozen=True)
class Settings:
    default_format: ColorCodeType = ColorCodeType.HEX
    suggestion_limit: int = DEFAULT_LIMIT
    suggestion_cutoff: float = DEFAULT_CUTOFF


def settings_from_dict(raw: dict[str, Any]) -> Settings:
    """Does: Validate a parsed colorcode.json payload into Settings."""
    unknown = set(raw) - _KNOWN_KEYS
    if unknown:
        raise SettingsError(f"Unknown settings: {', '.join(sorted(unknown))}")

    defaults = Settings()

    fmt = raw.get("default_format", defaults.default_format.value)
    if not isinstance(fmt, str):
        raise SettingsError(f"default_format must be a string, got {type(fmt).__name__}")
    try:
        default_format = ColorCodeType.from_tag(fmt)
    except UnknownCodeTypeError as e:
        raise SettingsError(str(e)) from e
    if default_format is ColorCodeType.INVALID:
        raise SettingsError("default_format cannot be 'invalid'")

    limit = raw.get("suggestion_limit", defaults.suggestion_limit)
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise SettingsError(f"suggestion_limit must be a non-negative integer, got {limit!r}")

    cutoff = raw.get("suggestion_cutoff", defaults.suggestion_cutoff)
    if isinstance(cutoff, bool) or not isinstance(cutoff, (int, float)) or not 0 <= cutoff <= 100:
        raise SettingsError(f"suggestion_cutoff must be a number in [0, 100], got {cutoff!r}")

    return Settings(
        default_format=default_format,
        suggestion_limit=limit,
        suggestion_cutoff=float(cutoff),
    )


def get_settings(base_dir: Path | None = None) -> Settings:
    """Does: Load colorcode.json if present, else return defaults."""
    try:
        raw = load_config(SETTINGS_FILE, mode="validated_dict", base_dir=base_dir)
    except (DataDirNotFound, ConfigFileNotFound) as e:
        debug(f"using default settings ({e})", topic="config")
        return Settings()
    settings = settings_from_dict(raw)
    debug(f"loaded settings: {settings}", topic="config")
    return settings

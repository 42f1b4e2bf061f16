# src/color_code/utils/load_config.py

"""Load JSON settings files from a data directory with mtime-keyed caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

The data directory comes from an explicit ``base_dir``, else the
COLOR_CODE_DATA_DIR or DATA_DIR environment variables.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
DATA_DIR_ENV_VARS = ("COLOR_CODE_DATA_DIR", "DATA_DIR")
__all__ = [
    "Mode",
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no data directory is configured or it does not exist."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# cache key: path, mtime, mode, encoding
_CONFIG_CACHE: dict[tuple[Path, float, str, str], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def resolve_data_dir(base_dir: Path | None = None) -> Path:
    """Return ``base_dir`` or the env-configured directory; raise if neither exists."""
    if base_dir is None:
        for var in DATA_DIR_ENV_VARS:
            v = os.environ.get(var)
            if v:
                base_dir = Path(os.path.expanduser(v))
                break
    if base_dir is None:
        raise DataDirNotFound(
            "No data directory configured (set one of: " + ", ".join(DATA_DIR_ENV_VARS) + ")"
        )
    data_dir = base_dir.resolve()
    if not data_dir.is_dir():
        raise DataDirNotFound(f"Data directory does not exist: {data_dir}")
    return data_dir


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results."""
    data_dir = resolve_data_dir(base_dir)

    # Normalize file path and enforce staying under data_dir
    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding)

    # Validators may transform the payload, so only unvalidated loads are cached
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE and validator is None:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if mode == "raw":
        result: Any = data

    elif mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except ConfigTypeError:
                raise
            except (TypeError, ValueError) as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
        result = data

    else:
        raise ValueError(f"Unknown mode '{mode}'")

    if validator is None:
        with _CACHE_LOCK:
            _CONFIG_CACHE[cache_key] = result
            log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    else:
        log.debug("Config loaded (validator present, not cached): %s (mode=%s)", path.name, mode)

    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set COLOR_CODE_DATA_DIR for the block."""

    _VAR = DATA_DIR_ENV_VARS[0]

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(self._VAR)
        os.environ[self._VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(self._VAR, None)
        else:
            os.environ[self._VAR] = self._old
        clear_config_cache()

# src/splitjoin/utils/load_config.py

"""Load JSON configs (split/join profiles) from a <data/> directory with caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> require a top-level object, then run an optional validator

Resolution order for the data directory: explicit base_dir, then
$SPLITJOIN_DATA_DIR, then the first `data/` found walking up from this
package (the wheel ships splitjoin/data/profiles.json).
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

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

ENV_VAR = "SPLITJOIN_DATA_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a config file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime, mode, encoding, allow_comments) -> parsed result
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (pytest / hot reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ── Path resolution ──────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    candidates = _candidate_data_dirs(start)
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


def _data_dir(base_dir: Path | str | None) -> Path:
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(ENV_VAR)
    if env:
        return Path(os.path.expanduser(env)).resolve()
    return _default_data_dir()


def _config_path(file: str | os.PathLike[str], data_dir: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith((".json", ".json5")):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ── Parsing ──────────────────────────────────────────────────────────────────
def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            return json5.load(f) if allow_comments else json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except ValueError as e:
        # json5 and the codec report bad input as plain ValueError
        raise ConfigParseError(f"Cannot parse {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | str | None = None,
    encoding: str = "utf-8",
    validator: Validator | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, check by mode, and cache results.

    Results are cached per (path, mtime, mode, encoding, allow_comments);
    calls with a validator always re-read the file.
    """
    if mode not in ("raw", "validated_dict"):
        raise ValueError(f"Unknown mode '{mode}'")

    path = _config_path(file, _data_dir(base_dir))
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e
    cache_key = (path, mtime, mode, encoding, allow_comments)

    if validator is None:
        with _CACHE_LOCK:
            if cache_key in _CONFIG_CACHE:
                log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
                return _CONFIG_CACHE[cache_key]

    data = _parse(path, encoding, allow_comments)

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected an object for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is not None:
            try:
                data = validator(data)
            except Exception as e:
                raise ConfigParseError(f"{path.name}: validator failed: {e}") from e
            log.debug("Config validated (not cached): %s", path.name)
            return data

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return data


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily point $SPLITJOIN_DATA_DIR at `path` for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(ENV_VAR)
        os.environ[ENV_VAR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(ENV_VAR, None)
        else:
            os.environ[ENV_VAR] = self._old
        clear_config_cache()

# splitjoin/splitter/default_pattern.py

"""
default_pattern.py.

Does: Hold the whitespace separator (\\s+) per character width, compiled once
      on first use behind a lock and shared by every caller afterwards.
Returns: default_pattern(kind) -> Pattern for str or bytes input.
Used by: split() when no explicit separator is given.
"""

from __future__ import annotations

import logging
import threading

from splitjoin.types import Pattern
from splitjoin.utils.log import debug

__all__ = ["WHITESPACE_EXPR", "default_pattern", "reset_default_patterns"]

log = logging.getLogger(__name__)

WHITESPACE_EXPR: dict[type, str | bytes] = {
    str: r"\s+",
    bytes: rb"\s+",
}

_LOCK = threading.Lock()
_PATTERNS: dict[type, Pattern] = {}


def default_pattern(kind: type = str) -> Pattern:
    """
    Does: Return the shared whitespace Pattern for `kind` (str or bytes;
          bytearray maps to bytes), compiling it on the first call.
    """
    if kind is bytearray:
        kind = bytes
    pattern = _PATTERNS.get(kind)
    if pattern is not None:
        return pattern
    if kind not in WHITESPACE_EXPR:
        raise TypeError(f"no default separator for width {kind.__name__}")
    with _LOCK:
        # another thread may have won the race while we waited
        pattern = _PATTERNS.get(kind)
        if pattern is None:
            pattern = Pattern(WHITESPACE_EXPR[kind])
            _PATTERNS[kind] = pattern
            log.debug("Compiled default separator for %s", kind.__name__)
            debug(f"default separator compiled for width={kind.__name__}", topic="split")
    return pattern


def reset_default_patterns() -> None:
    """Drop the compiled defaults (tests only)."""
    with _LOCK:
        _PATTERNS.clear()

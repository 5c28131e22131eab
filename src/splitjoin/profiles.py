# splitjoin/profiles.py

"""
profiles.py.

Does: Load named split/join parameter sets ({separator | pattern, flags,
      max_fields, joiner, last_joiner}) from <data>/profiles.json through
      load_config, validate them, and expose them as SplitProfile objects.
Returns: load_profiles() -> dict[str, SplitProfile]; get_profile(name).
Used by: demo CLI (--profile), applications keeping split settings in config.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from functools import reduce
from pathlib import Path
from typing import Any

from splitjoin.joiner import join
from splitjoin.splitter import split
from splitjoin.types import Pattern, Separator, as_separator
from splitjoin.utils.load_config import load_config
from splitjoin.utils.log import debug

__all__ = [
    "SplitProfile",
    "UnknownProfile",
    "load_profiles",
    "get_profile",
    "DEFAULT_PROFILES_FILE",
]

log = logging.getLogger(__name__)

DEFAULT_PROFILES_FILE = "profiles"

_KNOWN_KEYS = frozenset({"separator", "pattern", "flags", "max_fields", "joiner", "last_joiner"})


class UnknownProfile(KeyError):
    """Raise when a profile name is not defined in the profiles file."""


@dataclass(frozen=True)
class SplitProfile:
    """A stored parameter set for split() and join()."""

    name: str
    separator: Separator | None = None
    max_fields: int = 0
    joiner: str = ""
    last_joiner: str | None = None

    def split(self, text: str | bytes) -> list:
        return split(text, self.separator, self.max_fields)

    def join(self, values: Iterable[Any]) -> str | bytes:
        return join(values, self.joiner, self.last_joiner)


# ─────────────────────────────────────────────────────────────────────────────
# Validation
# ─────────────────────────────────────────────────────────────────────────────


def _flags_from_names(name: str, names: Any) -> int:
    if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
        raise ValueError(f"profile {name!r}: 'flags' must be a list of flag names")
    try:
        return reduce(lambda acc, n: acc | re.RegexFlag[n.upper()], names, 0)
    except KeyError as e:
        raise ValueError(f"profile {name!r}: unknown regex flag {e.args[0]!r}") from e


def _build_profile(name: str, spec: Any) -> SplitProfile:
    if not isinstance(spec, dict):
        raise ValueError(f"profile {name!r}: expected an object, got {type(spec).__name__}")
    unknown = set(spec) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"profile {name!r}: unknown keys {sorted(unknown)}")
    if "separator" in spec and "pattern" in spec:
        raise ValueError(f"profile {name!r}: give either 'separator' or 'pattern', not both")

    flags = _flags_from_names(name, spec["flags"]) if "flags" in spec else 0
    separator: Separator | None = None
    if "separator" in spec:
        if not isinstance(spec["separator"], str):
            raise ValueError(f"profile {name!r}: 'separator' must be a string")
        if flags:
            raise ValueError(f"profile {name!r}: 'flags' only apply to 'pattern'")
        separator = as_separator(spec["separator"])
    elif spec.get("pattern") is not None:
        if not isinstance(spec["pattern"], str):
            raise ValueError(f"profile {name!r}: 'pattern' must be a string or null")
        separator = Pattern(spec["pattern"], flags)  # InvalidPattern is a ValueError

    max_fields = spec.get("max_fields", 0)
    if isinstance(max_fields, bool) or not isinstance(max_fields, int) or max_fields < 0:
        raise ValueError(f"profile {name!r}: 'max_fields' must be an integer >= 0")

    joiner = spec.get("joiner", "")
    last_joiner = spec.get("last_joiner")
    if not isinstance(joiner, str) or not (last_joiner is None or isinstance(last_joiner, str)):
        raise ValueError(f"profile {name!r}: 'joiner'/'last_joiner' must be strings")

    return SplitProfile(
        name=name,
        separator=separator,
        max_fields=max_fields,
        joiner=joiner,
        last_joiner=last_joiner,
    )


def _validate(raw: dict[str, Any]) -> dict[str, Any]:
    return {name: _build_profile(name, spec) for name, spec in raw.items()}


# ─────────────────────────────────────────────────────────────────────────────
# Loading
# ─────────────────────────────────────────────────────────────────────────────


def load_profiles(
    file: str = DEFAULT_PROFILES_FILE,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> dict[str, SplitProfile]:
    """
    Does: Read and validate every profile in <data>/<file>.json.
    Returns: Mapping name -> SplitProfile.
    Raises: ConfigFileNotFound / DataDirNotFound when the file is missing,
            ConfigParseError on invalid JSON or an invalid profile,
            ConfigTypeError when the top level is not an object.
    """
    profiles = load_config(
        file,
        mode="validated_dict",
        base_dir=base_dir,
        validator=_validate,
        allow_comments=allow_comments,
    )
    log.debug("Loaded %d split profiles from %s", len(profiles), file)
    debug(f"profiles loaded: {', '.join(sorted(profiles))}", topic="config")
    return profiles


def get_profile(
    name: str,
    file: str = DEFAULT_PROFILES_FILE,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> SplitProfile:
    """Does: Look up one profile by name, raising UnknownProfile if absent."""
    profiles = load_profiles(file, base_dir=base_dir, allow_comments=allow_comments)
    try:
        return profiles[name]
    except KeyError:
        raise UnknownProfile(
            f"unknown profile {name!r}; available: {', '.join(sorted(profiles))}"
        ) from None

# splitjoin/types.py
"""
types.py.

Does: Define the separator variants understood by split (Char, Literal,
      Pattern), the InvalidPattern error, and the coercion from raw
      arguments (str, bytes, int, re.Pattern) to a separator.
Returns: Frozen dataclasses; as_separator() for argument normalization.
Used by: split_core, profiles, demo CLI.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

__all__ = [
    "Char",
    "Literal",
    "Pattern",
    "Separator",
    "InvalidPattern",
    "as_separator",
    "width_of",
]


class InvalidPattern(ValueError):
    """Raise when a separator pattern cannot be compiled."""

    def __init__(self, pattern: str | bytes, msg: str, pos: int | None = None):
        self.pattern = pattern
        self.pos = pos
        where = f" at position {pos}" if pos is not None else ""
        super().__init__(f"Invalid separator pattern {pattern!r}{where}: {msg}")


def width_of(obj: str | bytes | bytearray) -> type[str] | type[bytes]:
    """Does: Map a text-like object to its character width (str or bytes)."""
    if isinstance(obj, str):
        return str
    if isinstance(obj, (bytes, bytearray)):
        return bytes
    raise TypeError(f"expected str or bytes-like text, got {type(obj).__name__}")


@dataclass(frozen=True)
class Char:
    """A single-unit separator (one code point, or one byte)."""

    value: str | bytes

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, int) and not isinstance(value, bool):
            if not 0 <= value <= 255:
                raise ValueError(f"byte separator out of range: {value}")
            value = bytes([value])
        elif isinstance(value, bytearray):
            value = bytes(value)
        if not isinstance(value, (str, bytes)):
            raise TypeError(f"Char expects str, bytes or int, got {type(value).__name__}")
        if len(value) != 1:
            raise ValueError(f"Char separator must be exactly one unit, got {value!r}")
        object.__setattr__(self, "value", value)

    @property
    def width(self) -> type[str] | type[bytes]:
        return width_of(self.value)


@dataclass(frozen=True)
class Literal:
    """A literal substring separator. May be empty (splits every unit)."""

    value: str | bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, bytearray):
            object.__setattr__(self, "value", bytes(self.value))
        if not isinstance(self.value, (str, bytes)):
            raise TypeError(f"Literal expects str or bytes, got {type(self.value).__name__}")

    @property
    def width(self) -> type[str] | type[bytes]:
        return width_of(self.value)


@dataclass(frozen=True)
class Pattern:
    """
    A regular-expression separator, compiled at construction.

    `expr` may be a pattern string/bytes or an already compiled re.Pattern
    (in which case `flags` must be 0). Malformed expressions raise
    InvalidPattern here, never during splitting.
    """

    expr: str | bytes | re.Pattern
    flags: int = 0

    def __post_init__(self) -> None:
        expr = self.expr
        if isinstance(expr, re.Pattern):
            if self.flags:
                raise ValueError("cannot pass flags with an already compiled pattern")
            compiled = expr
        elif isinstance(expr, (str, bytes)):
            try:
                compiled = re.compile(expr, self.flags)
            except re.error as e:
                raise InvalidPattern(expr, e.msg, e.pos) from e
            except ValueError as e:
                # flag combinations re.compile refuses, e.g. UNICODE on bytes
                raise InvalidPattern(expr, str(e)) from e
        else:
            raise TypeError(f"Pattern expects str, bytes or re.Pattern, got {type(expr).__name__}")
        object.__setattr__(self, "expr", compiled)

    @property
    def regex(self) -> re.Pattern:
        return self.expr  # type: ignore[return-value]

    @property
    def width(self) -> type[str] | type[bytes]:
        return width_of(self.regex.pattern)


Separator = Union[Char, Literal, Pattern]


def as_separator(sep: object) -> Separator | None:
    """
    Does: Coerce a raw separator argument to a Separator variant.
          None stays None (whitespace default); one-unit str/bytes and
          ints become Char; other str/bytes become Literal; compiled
          regexes become Pattern.
    Returns: Separator instance or None.
    """
    if sep is None or isinstance(sep, (Char, Literal, Pattern)):
        return sep
    if isinstance(sep, re.Pattern):
        return Pattern(sep)
    if isinstance(sep, int) and not isinstance(sep, bool):
        return Char(sep)
    if isinstance(sep, (str, bytes, bytearray)):
        return Char(sep) if len(sep) == 1 else Literal(sep)
    raise TypeError(f"unsupported separator type: {type(sep).__name__}")

# splitjoin/splitter/split_core.py

"""
split_core.py.

Does: Split a str/bytes sequence into fields around a Char, Literal or
      Pattern separator, with an optional field-count limit.
      Unlimited (max_fields=0): trailing empty fields are dropped, leading
      and interior ones are kept.
      Limited (max_fields=N): at most N fields, the last one is the verbatim
      remainder (possibly empty), nothing is dropped.
Returns: A new list of slices of the input (same type as the input).
Used by: splitjoin.split(), SplitProfile.split(), demo CLI.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Union

from splitjoin.splitter.default_pattern import default_pattern
from splitjoin.types import Char, Literal, Pattern, Separator, as_separator, width_of

__all__ = ["split", "finder_for"]

Text = Union[str, bytes, bytearray]

# (field_end, resume): the field starting at the current offset ends at
# field_end, scanning continues at resume.
Hit = tuple[int, int]
Finder = Callable[[Text, int], Union[Hit, None]]


# ─────────────────────────────────────────────────────────────────────────────
# Search primitives
# ─────────────────────────────────────────────────────────────────────────────


def _find_substring(needle: str | bytes) -> Finder:
    size = len(needle)

    def find(text: Text, pos: int) -> Hit | None:
        i = text.find(needle, pos)
        return None if i < 0 else (i, i + size)

    return find


def _find_each_unit(text: Text, pos: int) -> Hit | None:
    # Empty literal: a zero-length match at every offset before the end.
    if pos >= len(text):
        return None
    return pos + 1, pos + 1


def _find_pattern(pattern: Pattern) -> Finder:
    regex = pattern.regex

    def find(text: Text, pos: int) -> Hit | None:
        m = regex.search(text, pos)
        if m is None:
            return None
        start, end = m.span()
        if end > start:
            return start, end
        # zero-length match: the unit at `start` closes the field
        end = min(start + 1, len(text))
        return end, end

    return find


def finder_for(separator: Separator) -> Finder:
    """
    Does: Build the search primitive for a separator variant.
    Returns: Callable(text, pos) -> (field_end, resume) | None.
    """
    if isinstance(separator, Char):
        return _find_substring(separator.value)
    if isinstance(separator, Literal):
        return _find_substring(separator.value) if separator.value else _find_each_unit
    if isinstance(separator, Pattern):
        return _find_pattern(separator)
    raise TypeError(f"unsupported separator: {separator!r}")


# ─────────────────────────────────────────────────────────────────────────────
# Field policies
# ─────────────────────────────────────────────────────────────────────────────


def _split_unlimited(text: Text, find: Finder) -> list:
    n = len(text)
    empty = text[:0]
    fields: list = []
    pending = 0
    pos = 0
    while pos < n:
        hit = find(text, pos)
        end, resume = (n, n) if hit is None else hit
        if end == pos:
            pending += 1
        else:
            fields.extend([empty] * pending)
            pending = 0
            fields.append(text[pos:end])
        pos = resume
    # empties still pending here came from trailing separators
    return fields


def _split_limited(text: Text, find: Finder, max_fields: int, *, pad_zero_width_tail: bool) -> list:
    n = len(text)
    fields: list = []
    pos = 0
    last_end = 0
    while True:
        if pos == n and last_end == n and not pad_zero_width_tail:
            # a zero-length match was clamped to the end: no field follows it
            return fields
        if len(fields) >= max_fields - 1:
            break
        hit = find(text, pos)
        if hit is None:
            break
        last_end, resume = hit
        fields.append(text[pos:last_end])
        pos = resume
    if len(fields) < max_fields:
        fields.append(text[pos:])
    return fields


# ─────────────────────────────────────────────────────────────────────────────
# Public entry point
# ─────────────────────────────────────────────────────────────────────────────


def split(
    text: Text,
    sep: object = None,
    max_fields: int = 0,
    *,
    default_sep: object = None,
) -> list:
    """
    Does: Split `text` around `sep` (Char, Literal, Pattern, or a raw
          str/bytes/int/re.Pattern coerced via as_separator).
          With sep=None the whitespace default (\\s+ for the input width, or
          `default_sep` when given) is used and leading whitespace is
          skipped first, so "  a   b  " gives ["a", "b"].
    Returns: list of fields; [] for empty input whatever the separator or limit.
    Raises: TypeError on unsupported/mismatched types, ValueError when
            max_fields is negative.
    """
    width = width_of(text)
    if isinstance(max_fields, bool) or not isinstance(max_fields, int):
        raise TypeError(f"max_fields must be an int, got {type(max_fields).__name__}")
    if max_fields < 0:
        raise ValueError(f"max_fields must be >= 0, got {max_fields}")

    separator = as_separator(sep)
    whitespace_form = separator is None
    if whitespace_form:
        separator = as_separator(default_sep) or default_pattern(width)

    if separator.width is not width:
        raise TypeError(
            f"separator width {separator.width.__name__} does not match "
            f"input width {width.__name__}"
        )

    if not text:
        return []

    find = finder_for(separator)

    if whitespace_form:
        hit = find(text, 0)
        if hit is not None and hit[0] == 0:
            text = text[hit[1]:]
            if not text:
                return []

    if max_fields == 0:
        return _split_unlimited(text, find)
    return _split_limited(
        text,
        find,
        max_fields,
        pad_zero_width_tail=not isinstance(separator, Pattern),
    )

# splitjoin/joiner/join_core.py

"""
join_core.py.

Does: Concatenate an iterable of values with a separator between each pair,
      using a distinct separator before the last element when asked.
Returns: str when the separator is str, bytes when it is bytes.
Used by: splitjoin.join(), SplitProfile.join(), demo CLI.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

__all__ = ["join"]

_MISSING = object()


def _renderer(
    kind: type,
    format_spec: str,
    formatter: Callable[[Any], str] | None,
    encoding: str,
) -> Callable[[Any], str | bytes]:
    def render(value: Any) -> str | bytes:
        if isinstance(value, str):
            if kind is bytes:
                raise TypeError("cannot join str element into bytes output")
            return value
        if isinstance(value, (bytes, bytearray)):
            if kind is str:
                raise TypeError("cannot join bytes element into str output")
            return bytes(value)
        text = formatter(value) if formatter is not None else format(value, format_spec)
        return text.encode(encoding) if kind is bytes else text

    return render


def join(
    values: Iterable[Any],
    sep: str | bytes = " ",
    last_sep: str | bytes | None = None,
    *,
    format_spec: str = "",
    formatter: Callable[[Any], str] | None = None,
    encoding: str = "utf-8",
) -> str | bytes:
    """
    Does: Join `values` with `sep`; the junction before the final element
          uses `last_sep` (defaults to `sep`). Non-text elements are rendered
          by `formatter` or format(value, format_spec). format_spec="n"
          follows the process-wide LC_NUMERIC; to format numbers for another
          locale in a single call, pass a `formatter` that renders for it.
    Returns: "" (or b"") for no values, the lone element for one value,
             a + last_sep + b for two, a + sep + ... + last_sep + z otherwise.
    """
    if isinstance(sep, bytearray):
        sep = bytes(sep)
    if not isinstance(sep, (str, bytes)):
        raise TypeError(f"separator must be str or bytes, got {type(sep).__name__}")
    if last_sep is None:
        last_sep = sep
    elif isinstance(last_sep, bytearray):
        last_sep = bytes(last_sep)
    kind = type(sep)
    if type(last_sep) is not kind:
        raise TypeError("last separator must have the same width as the separator")

    render = _renderer(kind, format_spec, formatter, encoding)
    parts: list = []
    held = _MISSING
    for value in values:
        if held is not _MISSING:
            if parts:
                parts.append(sep)
            parts.append(render(held))
        held = value
    if held is not _MISSING:
        if parts:
            parts.append(last_sep)
        parts.append(render(held))
    return kind().join(parts)

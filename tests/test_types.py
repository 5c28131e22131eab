# tests/test_types.py
"""Tests for separator variants, coercion and InvalidPattern."""

from __future__ import annotations

import re

import pytest

from splitjoin import types as T


# ---------- as_separator ----------
@pytest.mark.parametrize(
    "raw,expected",
    [
        (",", T.Char(",")),
        ("::", T.Literal("::")),
        ("", T.Literal("")),
        (b",", T.Char(b",")),
        (b"\r\n", T.Literal(b"\r\n")),
        (bytearray(b";"), T.Char(b";")),
        (44, T.Char(b",")),
    ],
)
def test_as_separator_coerces_raw_values(raw, expected):
    assert T.as_separator(raw) == expected


def test_as_separator_passes_through_variants_and_none():
    sep = T.Literal("ab")
    assert T.as_separator(sep) is sep
    assert T.as_separator(None) is None


def test_as_separator_wraps_compiled_regex():
    rx = re.compile(r"\s*;\s*")
    sep = T.as_separator(rx)
    assert isinstance(sep, T.Pattern)
    assert sep.regex is rx


@pytest.mark.parametrize("raw", [object(), 1.5, True, [","]])
def test_as_separator_rejects_other_types(raw):
    with pytest.raises(TypeError):
        T.as_separator(raw)


# ---------- Char / Literal ----------
@pytest.mark.parametrize("value", ["ab", "", b"", 256, -1])
def test_char_requires_exactly_one_unit(value):
    with pytest.raises(ValueError):
        T.Char(value)


def test_char_rejects_non_text():
    with pytest.raises(TypeError):
        T.Char(1.0)  # type: ignore[arg-type]


def test_char_normalizes_int_and_bytearray_to_bytes():
    assert T.Char(59).value == b";"
    assert T.Char(bytearray(b";")).value == b";"
    assert T.Char(59).width is bytes
    assert T.Char("é").width is str


def test_literal_rejects_non_text():
    with pytest.raises(TypeError):
        T.Literal(3)  # type: ignore[arg-type]


def test_variants_are_frozen():
    sep = T.Literal(",")
    with pytest.raises(AttributeError):
        sep.value = ";"  # type: ignore[misc]


# ---------- Pattern / InvalidPattern ----------
def test_pattern_compiles_at_construction():
    sep = T.Pattern(r"a+", re.IGNORECASE)
    assert sep.regex.search("xAAy").span() == (1, 3)
    assert sep.width is str
    assert T.Pattern(rb"\s").width is bytes


def test_invalid_pattern_is_raised_at_construction():
    with pytest.raises(T.InvalidPattern) as excinfo:
        T.Pattern("(")
    err = excinfo.value
    assert isinstance(err, ValueError)
    assert err.pattern == "("
    assert err.pos == 0
    assert isinstance(err.__cause__, re.error)
    assert "'('" in str(err)


@pytest.mark.parametrize(
    "expr,flags",
    [
        (rb"\s+", re.UNICODE),
        ("a", re.LOCALE),
        ("a", re.ASCII | re.UNICODE),
    ],
)
def test_unusable_flags_raise_invalid_pattern(expr, flags):
    with pytest.raises(T.InvalidPattern) as excinfo:
        T.Pattern(expr, flags)
    assert excinfo.value.pattern == expr
    assert excinfo.value.pos is None
    assert type(excinfo.value.__cause__) is ValueError


def test_pattern_rejects_flags_with_compiled_regex():
    with pytest.raises(ValueError):
        T.Pattern(re.compile("a"), re.IGNORECASE)


def test_pattern_rejects_other_types():
    with pytest.raises(TypeError):
        T.Pattern(42)  # type: ignore[arg-type]


# ---------- width_of ----------
@pytest.mark.parametrize(
    "obj,width",
    [("x", str), (b"x", bytes), (bytearray(b"x"), bytes)],
)
def test_width_of(obj, width):
    assert T.width_of(obj) is width


def test_width_of_rejects_other_types():
    with pytest.raises(TypeError):
        T.width_of(["x"])  # type: ignore[arg-type]

# tests/test_default_pattern.py
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from importlib import import_module

import pytest

from splitjoin import split

DP = import_module("splitjoin.splitter.default_pattern")


@pytest.fixture(autouse=True)
def _fresh_defaults():
    DP.reset_default_patterns()
    yield
    DP.reset_default_patterns()


def test_default_pattern_is_compiled_once_and_shared():
    first = DP.default_pattern(str)
    assert DP.default_pattern(str) is first
    assert first.regex.pattern == r"\s+"


def test_one_default_per_width():
    text_default = DP.default_pattern(str)
    bytes_default = DP.default_pattern(bytes)
    assert bytes_default.regex.pattern == rb"\s+"
    assert DP.default_pattern(bytearray) is bytes_default
    assert bytes_default is not text_default


def test_unknown_width_is_rejected():
    with pytest.raises(TypeError):
        DP.default_pattern(int)


def test_default_is_built_lazily_by_split():
    assert DP._PATTERNS == {}
    split("a b")
    assert set(DP._PATTERNS) == {str}
    split(b"a b")
    assert set(DP._PATTERNS) == {str, bytes}


def test_concurrent_first_use_compiles_once(monkeypatch):
    calls = []
    real_pattern = DP.Pattern

    def counting_pattern(expr):
        calls.append(expr)
        return real_pattern(expr)

    monkeypatch.setattr(DP, "Pattern", counting_pattern)

    workers = 16
    barrier = threading.Barrier(workers)

    def grab(_):
        barrier.wait()
        return DP.default_pattern(str)

    with ThreadPoolExecutor(max_workers=workers) as pool:
        results = list(pool.map(grab, range(workers)))

    assert len(calls) == 1
    assert all(r is results[0] for r in results)

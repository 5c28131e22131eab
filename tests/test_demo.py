# tests/test_demo.py
from __future__ import annotations

import json

import pytest

from splitjoin import demo


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    monkeypatch.setattr(demo, "load_dotenv", lambda: None)
    monkeypatch.delenv("SPLITJOIN_DATA_DIR", raising=False)


def _run(capsys, *argv):
    code = demo.main(list(argv))
    return code, capsys.readouterr()


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["split", "a,b,,c,", "--sep", ","], ["a", "b", "", "c"]),
        (["split", "  a  b "], ["a", "b"]),
        (["split", "a1b22c", "--regex", r"\d+"], ["a", "b", "c"]),
        (["split", "a,b,c", "--sep", ",", "--max-fields", "2"], ["a", "b,c"]),
        (["split", "k=v=w", "--profile", "key_value"], ["k", "v=w"]),
        (["split", "k=v=w", "--profile", "key_value", "--max-fields", "0"], ["k", "v", "w"]),
        (["split", "", "--sep", ","], []),
    ],
)
def test_split_command(capsys, argv, expected):
    code, out = _run(capsys, *argv)
    assert code == 0
    assert json.loads(out.out) == expected


@pytest.mark.parametrize(
    "argv,expected",
    [
        (["join", "x", "y", "z", "--sep", ",", "--last-sep", ";"], "x,y;z"),
        (["join", "a", "b"], "a b"),
        (["join", "a", "b", "c", "--last-sep", " or "], "a b or c"),
        (["join"], ""),
        (["join", "red", "green", "blue", "--profile", "english_list"], "red, green and blue"),
        (["join", "a", "b", "c", "--profile", "english_list", "--last-sep", " or "], "a, b or c"),
    ],
)
def test_join_command(capsys, argv, expected):
    code, out = _run(capsys, *argv)
    assert code == 0
    assert out.out == expected + "\n"


def test_invalid_regex_reports_error(capsys):
    code, out = _run(capsys, "split", "abc", "--regex", "(")
    assert code == 1
    assert "Error" in out.err
    assert out.out == ""


def test_unknown_profile_reports_error(capsys):
    code, out = _run(capsys, "join", "a", "--profile", "missing")
    assert code == 1
    assert "unknown profile" in out.err


def test_separator_options_are_exclusive(capsys):
    with pytest.raises(SystemExit):
        demo.main(["split", "abc", "--sep", ",", "--regex", ","])

import pytest

from flexaxis.axis.Parser import (DEFAULT_AXIS, ParsedAxis, TokenPattern,
                                  TokenType, Unrecognized, UnparseableAxisSpec,
                                  classify, extract, get_token_type,
                                  parse_axis_spec)
from flexaxis.config import g
from flexaxis.types import BugError


def test_token_types():
    assert get_token_type("4px") is TokenType.LENGTH
    assert get_token_type("0") is TokenType.LENGTH
    assert get_token_type("1.5rem") is TokenType.LENGTH
    assert get_token_type("center") is TokenType.KEYWORD
    assert get_token_type("cneter") is TokenType.KEYWORD


def test_patterns():
    assert parse_axis_spec("center") == ParsedAxis(("0", "0"), "center", None)
    assert parse_axis_spec("4px center") == ParsedAxis(("4px", "4px"), "center", None)
    assert parse_axis_spec("4px center 8px") == ParsedAxis(
        ("4px", "4px"), "center", "8px"
    )
    assert parse_axis_spec("4px 5px center") == ParsedAxis(
        ("4px", "5px"), "center", None
    )
    assert parse_axis_spec("4px 5px center 8px") == ParsedAxis(
        ("4px", "5px"), "center", "8px"
    )
    assert parse_axis_spec("stretch 8px") == ParsedAxis(("0", "0"), "stretch", "8px")
    assert parse_axis_spec("8px") == ParsedAxis(("0", "0"), None, "8px")
    assert parse_axis_spec("4px 8px") == ParsedAxis(("4px", "4px"), None, "8px")
    assert parse_axis_spec("4px 5px 8px") == ParsedAxis(("4px", "5px"), None, "8px")


def test_whitespace():
    assert parse_axis_spec("  1rem\t\tend   2rem ") == ParsedAxis(
        ("1rem", "1rem"), "end", "2rem"
    )


def test_keywords_are_not_validated(caplog):
    assert parse_axis_spec("4px cneter").alignment == "cneter"
    assert parse_axis_spec("???").alignment == "???"
    assert not caplog.records


def test_no_string():
    assert parse_axis_spec(None) == DEFAULT_AXIS
    assert parse_axis_spec(True) == DEFAULT_AXIS
    assert DEFAULT_AXIS == ParsedAxis(("0", "0"), None, None)


def test_classify():
    tokens, pattern = classify("4px 5px center 4px")
    assert tokens == ["4px", "5px", "center", "4px"]
    assert pattern is TokenPattern.PADDINGS_ALIGNMENT_GAP

    _, pattern = classify("center center")
    assert pattern == Unrecognized("center center", "keyword keyword")


def test_unparseable(caplog):
    assert parse_axis_spec("center center") == DEFAULT_AXIS
    assert len(caplog.records) == 1
    assert "Couldn't parse axis value: 'center center'" in caplog.records[0].message

    caplog.clear()
    assert parse_axis_spec("1px 2px 3px 4px 5px") == DEFAULT_AXIS
    assert parse_axis_spec("") == DEFAULT_AXIS
    assert parse_axis_spec("   ") == DEFAULT_AXIS
    assert len(caplog.records) == 3


def test_strict(monkeypatch):
    with pytest.raises(UnparseableAxisSpec) as info:
        parse_axis_spec("center 1px center", strict=True)
    assert info.value.value == "center 1px center"
    assert info.value.types == "keyword length keyword"

    monkeypatch.setitem(g, "strict", True)
    with pytest.raises(UnparseableAxisSpec):
        parse_axis_spec("")
    assert parse_axis_spec("", strict=False) == DEFAULT_AXIS
    # only malformed strings raise
    assert parse_axis_spec(True) == DEFAULT_AXIS


def test_error_log(tmp_path, monkeypatch):
    log_file = tmp_path / "error.log"
    monkeypatch.setitem(g, "error_log", log_file)
    parse_axis_spec("start end")
    parse_axis_spec("start")
    assert log_file.read_text("utf-8") == "Couldn't parse axis value: 'start end'\n"


def test_extract_mismatch():
    with pytest.raises(BugError):
        extract(TokenPattern.GAP, ["1px", "2px"])


def test_ascii_digits_only(caplog):
    assert get_token_type("٣") is TokenType.KEYWORD
    assert parse_axis_spec("٣ center") == DEFAULT_AXIS
    assert len(caplog.records) == 1

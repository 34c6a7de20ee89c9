from __future__ import annotations

import re

import pytest

from devtext import PatternError, RegexMatch, compile_pattern
from devtext import test_regex as run_regex


def _pairs(result):
    return [(match.match, match.index) for match in result.matches]


def test_global_flag_returns_every_match():
    result = run_regex(r"\d+", "a1 b22 c333", "g")

    assert result.ok
    assert _pairs(result) == [("1", 1), ("22", 4), ("333", 8)]


def test_without_global_flag_returns_first_match_only():
    result = run_regex(r"\d+", "a1 b22 c333", "")

    assert _pairs(result) == [("1", 1)]


def test_default_flags_are_global():
    assert len(run_regex("o", "foo boo").matches) == 4


def test_zero_width_matches_terminate():
    result = run_regex("a*", "bbb", "g")

    assert _pairs(result) == [("", 0), ("", 1), ("", 2), ("", 3)]


def test_zero_width_match_after_consumed_text():
    result = run_regex("a*", "aab", "g")

    assert _pairs(result) == [("aa", 0), ("", 2), ("", 3)]


def test_groups_keep_order_and_unmatched_optional_is_none():
    result = run_regex(r"(\w+)@(\w+)(\.com)?", "joe@example.org", "g")

    assert result.matches == (RegexMatch("joe@example", 0, ("joe", "example", None)),)


def test_no_match_is_empty_without_error():
    result = run_regex("xyz", "abc", "g")

    assert result.matches == ()
    assert result.error is None


def test_ignore_case_and_multiline_flags():
    assert len(run_regex("hello", "HELLO hello", "gi").matches) == 2
    assert _pairs(run_regex("^b", "a\nb", "gm")) == [("b", 2)]
    assert run_regex("^b", "a\nb", "g").matches == ()


def test_dotall_flag():
    assert _pairs(run_regex("a.b", "a\nb", "s")) == [("a\nb", 0)]
    assert run_regex("a.b", "a\nb", "").matches == ()


def test_sticky_flag_anchors_at_cursor():
    assert _pairs(run_regex("a", "aab", "gy")) == [("a", 0), ("a", 1)]
    assert run_regex("a", "baa", "y").matches == ()


def test_index_counts_utf16_code_units():
    result = run_regex("b", "\U0001F600b\U0001F600b", "g")

    assert [match.index for match in result.matches] == [2, 5]


def test_invalid_pattern_is_reported_as_data():
    result = run_regex("(", "text", "g")

    assert result.matches == ()
    assert not result.ok
    assert result.error.startswith("Invalid regex: ")
    assert result.as_dict()["error"] == result.error


@pytest.mark.parametrize("flags", ["gx", "gg", "uv"])
def test_invalid_flags_are_reported(flags):
    result = run_regex("a", "a", flags)

    assert result.matches == ()
    assert "Invalid flags" in result.error


def test_compile_pattern_raises_pattern_error():
    with pytest.raises(PatternError):
        compile_pattern("[unclosed")
    with pytest.raises(ValueError):
        compile_pattern("a", "q")


def test_compile_pattern_translates_flags():
    compiled = compile_pattern("a", "gimsu")

    assert compiled.is_global
    assert not compiled.sticky
    assert compiled.regex.flags & re.IGNORECASE
    assert compiled.regex.flags & re.MULTILINE
    assert compiled.regex.flags & re.DOTALL


def test_match_as_dict():
    match = run_regex(r"(a)(b)?", "a", "").matches[0]

    assert match.as_dict() == {"match": "a", "index": 0, "groups": ["a", None]}


def test_named_groups_use_javascript_syntax():
    result = run_regex(r"(?<y>\d+)", "2024", "g")

    assert result.ok
    assert result.matches == (RegexMatch("2024", 0, ("2024",)),)
    assert compile_pattern(r"(?<year>\d{4})-(?P<month>\d\d)").regex.groupindex == {"year": 1, "month": 2}


def test_named_backreference():
    assert _pairs(run_regex(r"(?<c>\w)\k<c>", "ab xx yz", "g")) == [("xx", 3)]


def test_lookbehind_is_not_treated_as_a_named_group():
    assert _pairs(run_regex(r"(?<=a)b", "ab cb", "g")) == [("b", 1)]
    assert _pairs(run_regex(r"(?<!a)b", "ab cb", "g")) == [("b", 4)]


def test_escaped_and_bracketed_group_syntax_stays_literal():
    assert _pairs(run_regex(r"\(?<x>", "a (<x>", "g")) == [("(<x>", 2)]
    assert _pairs(run_regex(r"[(?<]", "a<", "g")) == [("<", 1)]

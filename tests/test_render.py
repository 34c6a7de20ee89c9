from __future__ import annotations

from devtext import compute_text_diff, render_unified


def test_render_unified_marks_changed_words():
    result = compute_text_diff(
        "Hello World\nThis is line 2\nCommon line",
        "Hello World\nThis is line 2 modified\nCommon line",
    )

    assert render_unified(result) == (
        " Hello World\n"
        "-This is line 2\n"
        "+This is line 2{+ +}{+modified+}\n"
        " Common line\n"
    )


def test_render_unified_unrelated_lines_have_no_markers():
    result = compute_text_diff("apples are red", "the sky is blue")

    assert render_unified(result) == "-apples are red\n+the sky is blue\n"


def test_render_unified_does_not_escape_markup():
    result = compute_text_diff("<a> one", "<a> two")

    assert render_unified(result) == "-<a> one\n+<a> {+two+}\n"

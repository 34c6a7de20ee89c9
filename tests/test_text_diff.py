from __future__ import annotations

import pytest

from devtext import ChangeType, DiffConfig, compute_text_diff

MARK = '<mark class="diff-word-modified">'


def _reconstruct(result, kinds) -> str:
    return "\n".join(line.content for line in result.lines if line.kind in kinds)


def test_diff_identical_texts_yields_normal_lines():
    text = "alpha\nbeta\n\ngamma"
    result = compute_text_diff(text, text)

    assert [line.kind for line in result.lines] == [ChangeType.NORMAL] * 4
    assert [line.line_number for line in result.lines] == [1, 2, 3, 4]
    assert not result.has_changes
    assert not result.stats.has_changes


def test_diff_marks_similar_line_as_modified_pair():
    left = "Hello World\nThis is line 2\nCommon line"
    right = "Hello World\nThis is line 2 modified\nCommon line"

    result = compute_text_diff(left, right)

    kinds = [line.kind for line in result.lines]
    assert kinds == [ChangeType.NORMAL, ChangeType.REMOVE, ChangeType.ADD, ChangeType.NORMAL]
    removed, added = result.lines[1], result.lines[2]
    assert removed.content == "This is line 2"
    assert removed.highlighted_content is None
    assert added.content == "This is line 2 modified"
    assert added.highlighted_content == f"This is line 2{MARK} </mark>{MARK}modified</mark>"
    assert removed.line_number == added.line_number == 2
    assert result.lines[3].line_number == 3

    stats = result.stats
    assert stats.lines_modified == 1
    assert stats.lines_added == 0
    assert stats.lines_removed == 0
    assert stats.characters_removed == 14
    assert stats.characters_added == 23
    assert stats.characters_modified == 9


def test_diff_unrelated_lines_are_plain_remove_and_add():
    result = compute_text_diff("apples are red", "the sky is blue")

    assert [line.kind for line in result.lines] == [ChangeType.REMOVE, ChangeType.ADD]
    assert all(line.highlighted_content is None for line in result.lines)
    assert result.stats.lines_removed == 1
    assert result.stats.lines_added == 1
    assert result.stats.lines_modified == 0
    assert result.stats.characters_modified == 0


def test_similarity_at_threshold_is_not_a_modification():
    # 3 shared tokens out of 10 distinct ones: exactly 0.3
    result = compute_text_diff("a b c d e f g", "a b c h i j")

    assert result.stats.lines_modified == 0
    assert result.stats.lines_removed == 1
    assert result.stats.lines_added == 1


def test_config_threshold_controls_highlighting():
    config = DiffConfig(similarity_threshold=0.9)
    result = compute_text_diff("This is line 2", "This is line 2 modified", config=config)

    assert result.stats.lines_modified == 0
    assert result.lines[1].highlighted_content is None


def test_config_highlight_class_is_used():
    config = DiffConfig(highlight_class="changed")
    result = compute_text_diff("value one", "value two", config=config)

    assert result.lines[1].highlighted_content == 'value <mark class="changed">two</mark>'


def test_config_escape_html_escapes_highlighted_tokens():
    config = DiffConfig(escape_html=True)
    result = compute_text_diff("a <i>", "a <b>", config=config)

    assert result.lines[1].highlighted_content == f"a {MARK}&lt;b&gt;</mark>"
    assert result.lines[1].content == "a <b>"


def test_insertion_cascades_without_realignment():
    result = compute_text_diff("a\nb\nc", "x\na\nb\nc")

    kinds = [line.kind for line in result.lines]
    assert kinds == [
        ChangeType.REMOVE,
        ChangeType.ADD,
        ChangeType.REMOVE,
        ChangeType.ADD,
        ChangeType.REMOVE,
        ChangeType.ADD,
        ChangeType.ADD,
    ]
    assert [line.line_number for line in result.lines] == [1, 1, 2, 2, 3, 3, 4]
    assert result.stats.lines_removed == 3
    assert result.stats.lines_added == 4


def test_trailing_lines_are_added_or_removed():
    added = compute_text_diff("one", "one\ntwo\nthree")
    assert [line.kind for line in added.lines] == [ChangeType.NORMAL, ChangeType.ADD, ChangeType.ADD]
    assert added.stats.lines_added == 2
    assert added.stats.characters_added == 8

    removed = compute_text_diff("one\ntwo\nthree", "one")
    assert [line.kind for line in removed.lines] == [ChangeType.NORMAL, ChangeType.REMOVE, ChangeType.REMOVE]
    assert removed.stats.lines_removed == 2
    assert removed.stats.characters_removed == 8


def test_empty_text_is_a_single_empty_line():
    result = compute_text_diff("one\ntwo", "")

    assert [(line.kind, line.content) for line in result.lines] == [
        (ChangeType.REMOVE, "one"),
        (ChangeType.ADD, ""),
        (ChangeType.REMOVE, "two"),
    ]
    assert result.stats.lines_removed == 2
    assert result.stats.lines_added == 1


def test_both_empty_texts():
    result = compute_text_diff("", "")

    assert len(result.lines) == 1
    assert result.lines[0].kind is ChangeType.NORMAL
    assert result.lines[0].content == ""


def test_character_counts_use_utf16_code_units():
    result = compute_text_diff("", "\U0001F600")

    assert result.stats.characters_added == 2


@pytest.mark.parametrize(
    ("left", "right"),
    [
        ("a\nb\nc", "a\nB\nc\nd"),
        ("", "new\nlines"),
        ("x y z\n\n", "x y\nz\n"),
        ("Hello World\nThis is line 2", "Hello World\nThis is line 2 modified\nextra"),
    ],
)
def test_rows_reconstruct_both_inputs(left, right):
    result = compute_text_diff(left, right)

    assert _reconstruct(result, {ChangeType.REMOVE, ChangeType.NORMAL}) == left
    assert _reconstruct(result, {ChangeType.ADD, ChangeType.NORMAL}) == right


def test_as_dict_uses_browser_field_names():
    result = compute_text_diff("value one", "value two")
    data = result.as_dict()

    assert data["diff"][0] == {"type": "remove", "content": "value one", "lineNumber": 1}
    assert data["diff"][1]["highlightedContent"].startswith("value ")
    assert data["stats"]["linesModified"] == 1
    assert set(data["stats"]) == {
        "linesAdded",
        "linesRemoved",
        "linesModified",
        "charactersAdded",
        "charactersRemoved",
        "charactersModified",
    }

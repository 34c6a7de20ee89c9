from __future__ import annotations

import pytest

from devtext import TextStats, count_text_stats
from devtext.stats import code_unit_length


@pytest.mark.parametrize("text", ["", "   ", "\n\n", " \t\n "])
def test_blank_text_is_all_zero(text):
    assert count_text_stats(text) == TextStats()


def test_multiple_spaces_do_not_add_words():
    assert count_text_stats("a b  c").words == 3


def test_counts_for_a_short_passage():
    stats = count_text_stats("Hello world. How are you? Fine!")

    assert stats.characters == 31
    assert stats.characters_no_spaces == 26
    assert stats.words == 6
    assert stats.sentences == 3
    assert stats.paragraphs == 1
    assert stats.lines == 1
    assert stats.bytes == 31


def test_paragraphs_and_lines():
    stats = count_text_stats("Para one.\n\nPara two.\nStill two.")

    assert stats.paragraphs == 2
    assert stats.lines == 4
    assert stats.sentences == 3


def test_blank_lines_with_spaces_separate_paragraphs():
    stats = count_text_stats("first\n   \n\n second\n")

    assert stats.paragraphs == 2
    assert stats.lines == 5


def test_text_without_terminator_is_one_sentence():
    assert count_text_stats("no full stop here").sentences == 1


def test_repeated_terminators_end_one_sentence():
    assert count_text_stats("Really?!... Yes.").sentences == 2


def test_multibyte_characters():
    stats = count_text_stats("héllo")

    assert stats.characters == 5
    assert stats.bytes == 6


def test_astral_characters_count_as_two_code_units():
    stats = count_text_stats("\U0001F600 ok")

    assert stats.characters == 5
    assert stats.characters_no_spaces == 4
    assert stats.bytes == 7
    assert stats.words == 2


def test_code_unit_length():
    assert code_unit_length("") == 0
    assert code_unit_length("abc") == 3
    assert code_unit_length("a\U0001F600") == 3


def test_as_dict_uses_browser_field_names():
    data = count_text_stats("one two").as_dict()

    assert data == {
        "characters": 7,
        "charactersNoSpaces": 6,
        "words": 2,
        "sentences": 1,
        "paragraphs": 1,
        "lines": 1,
        "bytes": 7,
    }


def test_byte_order_mark_is_whitespace():
    assert count_text_stats("\ufeff") == TextStats()

    stats = count_text_stats("a\ufeffb c")
    assert stats.words == 3
    assert stats.characters == 5
    assert stats.characters_no_spaces == 3


def test_information_separators_are_not_whitespace():
    stats = count_text_stats("a\x1cb")

    assert stats.words == 1
    assert stats.characters == 3
    assert stats.characters_no_spaces == 3
    assert count_text_stats("\x1f").words == 1

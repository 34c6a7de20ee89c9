"""Character, word, sentence and paragraph counts for a block of text."""

from __future__ import annotations

import logging
import re

from .models import TextStats

logger = logging.getLogger(__name__)

# Characters matched by JavaScript's \s and stripped by String.prototype.trim.
JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
WHITESPACE_CLASS = f"[{JS_WHITESPACE}]"

_WHITESPACE_RE = re.compile(f"{WHITESPACE_CLASS}+")
_SINGLE_WHITESPACE_RE = re.compile(WHITESPACE_CLASS)
_SENTENCE_END_RE = re.compile(r"[.!?]+")
_PARAGRAPH_BREAK_RE = re.compile(f"\n{WHITESPACE_CLASS}*\n")


def count_text_stats(text: str) -> TextStats:
    """Count characters, words, sentences, paragraphs, lines and UTF-8 bytes.

    Character counts are UTF-16 code units so they agree with the ``length``
    a browser reports; ``bytes`` is the UTF-8 encoded size. Blank input
    yields an all-zero record.
    """

    if not js_trim(text):
        return TextStats()

    words = [word for word in _WHITESPACE_RE.split(js_trim(text)) if word]
    sentences = [part for part in _SENTENCE_END_RE.split(text) if js_trim(part)]
    paragraphs = [part for part in _PARAGRAPH_BREAK_RE.split(text) if js_trim(part)]

    stats = TextStats(
        characters=code_unit_length(text),
        characters_no_spaces=code_unit_length(_SINGLE_WHITESPACE_RE.sub("", text)),
        words=len(words),
        sentences=len(sentences),
        paragraphs=len(paragraphs),
        lines=len(text.split("\n")),
        bytes=len(text.encode("utf-8", errors="surrogatepass")),
    )
    logger.debug("Counted stats for %d characters: %s", stats.characters, stats)
    return stats


def code_unit_length(text: str) -> int:
    """Length of ``text`` in UTF-16 code units."""

    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def js_trim(text: str) -> str:
    """Strip leading and trailing whitespace as ``String.prototype.trim`` does."""

    return text.strip(JS_WHITESPACE)

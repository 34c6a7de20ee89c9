"""Word-level highlighting for a pair of similar lines."""

from __future__ import annotations

from html import escape
from itertools import zip_longest
import re
from typing import Iterable, List

from .models import DiffConfig, WordToken
from .stats import WHITESPACE_CLASS

_SEPARATOR_RE = re.compile(f"({WHITESPACE_CLASS}+)")

DEFAULT_MARKER_CLASS = DiffConfig().highlight_class


def word_diff(
    line1: str,
    line2: str,
    *,
    marker_class: str = DEFAULT_MARKER_CLASS,
    escape_html: bool = False,
) -> str:
    """Return ``line2`` as markup with the tokens that differ from ``line1`` wrapped.

    Tokens are compared by position, not aligned: inserting a word shifts
    every following token and marks all of them as changed.

    Token text is emitted as written. Pass ``escape_html=True`` when the
    result is injected into a page and the lines may contain markup.
    """

    return render_word_tokens(
        word_diff_tokens(line1, line2),
        marker_class=marker_class,
        escape_html=escape_html,
    )


def word_diff_tokens(line1: str, line2: str) -> tuple[WordToken, ...]:
    """Compare the whitespace-separated tokens of two lines position by position.

    Separators are kept as tokens so the output round-trips ``line2``. A
    position where ``line2`` has no token yields nothing.
    """

    tokens: List[WordToken] = []
    for old, new in zip_longest(_tokenize(line1), _tokenize(line2), fillvalue=""):
        if old == new:
            tokens.append(WordToken(new))
        elif new:
            tokens.append(WordToken(new, changed=True))
    return tuple(tokens)


def render_word_tokens(
    tokens: Iterable[WordToken],
    *,
    marker_class: str = DEFAULT_MARKER_CLASS,
    escape_html: bool = False,
) -> str:
    pieces: List[str] = []
    for token in tokens:
        text = escape(token.text, quote=False) if escape_html else token.text
        if token.changed:
            pieces.append(f'<mark class="{escape(marker_class)}">{text}</mark>')
        else:
            pieces.append(text)
    return "".join(pieces)


def _tokenize(line: str) -> List[str]:
    return _SEPARATOR_RE.split(line)

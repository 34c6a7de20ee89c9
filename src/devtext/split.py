"""Split text on a delimiter."""

from __future__ import annotations

from typing import List

from .stats import js_trim

_ESCAPED_DELIMITERS = {
    "\\n": "\n",
    "\\t": "\t",
}


def split_text(
    text: str,
    delimiter: str = ",",
    *,
    trim_whitespace: bool = True,
    remove_empty: bool = True,
) -> List[str]:
    """Split ``text`` on ``delimiter``.

    The two-character delimiters ``\\n`` and ``\\t`` stand for a newline and a
    tab. An empty delimiter splits into single characters.
    """

    separator = _ESCAPED_DELIMITERS.get(delimiter, delimiter)
    parts = text.split(separator) if separator else list(text)

    if trim_whitespace:
        parts = [js_trim(part) for part in parts]
    if remove_empty:
        parts = [part for part in parts if part]
    return parts

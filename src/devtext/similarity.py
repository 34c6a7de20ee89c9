"""Token-overlap similarity between two lines."""

from __future__ import annotations

import re
from typing import FrozenSet

from .stats import WHITESPACE_CLASS

_WHITESPACE_RE = re.compile(f"{WHITESPACE_CLASS}+")


def line_similarity(line1: str, line2: str) -> float:
    """Return the Jaccard index of the lower-cased whitespace tokens of two lines.

    Leading or trailing whitespace contributes an empty-string token, the same
    way a JavaScript ``split(/\\s+/)`` does. The result is ``0.0`` when the
    union of tokens is empty.
    """

    tokens1 = _token_set(line1)
    tokens2 = _token_set(line2)
    union = tokens1 | tokens2
    if not union:
        return 0.0
    return len(tokens1 & tokens2) / len(union)


def _token_set(line: str) -> FrozenSet[str]:
    return frozenset(_WHITESPACE_RE.split(line.lower()))

"""Line sorting by collation, numeric value or length."""

from __future__ import annotations

from functools import cmp_to_key
import logging
import re
import unicodedata
from typing import NamedTuple

from .models import SortOrder, SortType
from .stats import WHITESPACE_CLASS, code_unit_length

logger = logging.getLogger(__name__)

_FLOAT_PREFIX_RE = re.compile(
    f"^{WHITESPACE_CLASS}*"
    r"([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


class _SortLine(NamedTuple):
    original: str
    processed: str
    collation: tuple[tuple[tuple[int, str], ...], str, str]


def sort_text(
    text: str,
    sort_type: SortType | str,
    order: SortOrder | str,
    case_sensitive: bool = False,
) -> str:
    """Sort the lines of ``text`` and join them back with newlines.

    Lines are compared on a lower-cased copy unless ``case_sensitive``; the
    output always keeps each line as written. The sort is stable.

    ``numerical`` parses the leading number of each line and falls back to
    collation when either side has none, so numeric and non-numeric lines can
    interleave. Unknown sort types fall back to ``alphabetical``.
    """

    kind = _coerce_sort_type(sort_type)
    direction = SortOrder(order)
    lines = []
    for line in text.split("\n"):
        processed = line if case_sensitive else line.lower()
        lines.append(_SortLine(line, processed, _collation_key(processed)))

    def compare(a: _SortLine, b: _SortLine) -> int:
        if kind is SortType.NUMERICAL:
            comparison = _compare_numbers(a, b)
        elif kind is SortType.LENGTH:
            comparison = code_unit_length(a.original) - code_unit_length(b.original)
            if comparison == 0:
                comparison = _compare_keys(a.collation, b.collation)
        else:
            comparison = _compare_keys(a.collation, b.collation)
        return -comparison if direction is SortOrder.DESC else comparison

    ordered = sorted(lines, key=cmp_to_key(compare))
    logger.debug("Sorted %d lines by %s (%s)", len(lines), kind.value, direction.value)
    return "\n".join(line.original for line in ordered)


def locale_compare(a: str, b: str) -> int:
    """Compare two strings the way a default-locale collation orders them.

    Characters rank by class first: whitespace, punctuation, symbols, digits,
    then letters. Accents and case are ignored at that level; remaining ties
    put lower case before upper case and finally fall back to code points.
    """

    return _compare_keys(_collation_key(a), _collation_key(b))


def parse_float(value: str) -> float | None:
    """Parse the leading decimal number of ``value``, or return None."""

    found = _FLOAT_PREFIX_RE.match(value)
    if found is None:
        return None
    return float(found.group(1).replace("Infinity", "inf"))


def _compare_numbers(a: _SortLine, b: _SortLine) -> int:
    num_a = parse_float(a.processed)
    num_b = parse_float(b.processed)
    if num_a is None or num_b is None:
        return _compare_keys(a.collation, b.collation)
    return _compare_keys(num_a, num_b)


def _compare_keys(a, b) -> int:
    return (a > b) - (a < b)


_CHARACTER_TIERS = {"Z": 0, "C": 0, "P": 1, "S": 2, "N": 3}


def _collation_key(value: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    primary = tuple((_character_tier(ch), ch) for ch in base.casefold())
    return (primary, base.swapcase(), value)


def _character_tier(ch: str) -> int:
    # whitespace and controls < punctuation < symbols < digits < letters
    return _CHARACTER_TIERS.get(unicodedata.category(ch)[0], 4)


def _coerce_sort_type(sort_type: SortType | str) -> SortType:
    try:
        return SortType(sort_type)
    except ValueError:
        logger.debug("Unknown sort type %r, sorting alphabetically", sort_type)
        return SortType.ALPHABETICAL

"""Search and replace with literal or regular-expression search."""

from __future__ import annotations

import logging
import re
from typing import List

from .models import PatternError, ReplaceResult
from .regex import compile_pattern

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"


def search_replace(
    text: str,
    search: str,
    replacement: str,
    *,
    is_regex: bool = False,
    case_sensitive: bool = False,
    replace_all: bool = True,
) -> ReplaceResult:
    """Replace occurrences of ``search`` in ``text``.

    ``replacement`` uses JavaScript substitution patterns (``$&``, ``$1``,
    ``$<name>``, ``$$``, ``$``` and ``$'``) whether or not ``search`` is a
    regular expression. Errors are reported on the result and leave ``text``
    unchanged.
    """

    if not search:
        return ReplaceResult(text=text, error="Search text cannot be empty")

    flags = "" if case_sensitive else "i"
    if replace_all:
        flags += "g"
    pattern = search if is_regex else re.escape(search)

    try:
        compiled = compile_pattern(pattern, flags)
    except PatternError as exc:
        logger.debug("Rejected search pattern %r: %s", search, exc)
        return ReplaceResult(text=text, error=f"Invalid regex pattern: {exc}")

    result, count = compiled.regex.subn(
        lambda match: expand_replacement(replacement, match),
        text,
        count=0 if compiled.is_global else 1,
    )
    logger.debug("Replaced %d occurrence(s) of %r", count, search)
    return ReplaceResult(text=result, match_count=count)


def expand_replacement(template: str, match: re.Match[str]) -> str:
    """Expand JavaScript ``String.prototype.replace`` substitutions for ``match``."""

    source = match.string
    group_count = match.re.groups
    named = match.re.groupindex
    pieces: List[str] = []
    i = 0
    while i < len(template):
        ch = template[i]
        if ch != "$" or i + 1 >= len(template):
            pieces.append(ch)
            i += 1
            continue

        marker = template[i + 1]
        if marker == "$":
            pieces.append("$")
            i += 2
        elif marker == "&":
            pieces.append(match.group(0))
            i += 2
        elif marker == "`":
            pieces.append(source[: match.start()])
            i += 2
        elif marker == "'":
            pieces.append(source[match.end():])
            i += 2
        elif marker in _DIGITS:
            two = template[i + 1 : i + 3]
            if len(two) == 2 and two[1] in _DIGITS and 1 <= int(two) <= group_count:
                pieces.append(match.group(int(two)) or "")
                i += 3
            elif 1 <= int(marker) <= group_count:
                pieces.append(match.group(int(marker)) or "")
                i += 2
            else:
                pieces.append("$")
                i += 1
        elif marker == "<" and named:
            close = template.find(">", i + 2)
            if close == -1:
                pieces.append("$")
                i += 1
                continue
            name = template[i + 2 : close]
            pieces.append((match.group(name) if name in named else None) or "")
            i = close + 1
        else:
            pieces.append("$")
            i += 1
    return "".join(pieces)

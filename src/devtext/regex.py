"""Regular expression tester with JavaScript-style flags."""

from __future__ import annotations

import logging
import re
from typing import List, NamedTuple

from .models import PatternError, RegexMatch, RegexResult

logger = logging.getLogger(__name__)

_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
# Accepted for compatibility; Python str patterns are always Unicode-aware and
# match positions are always reported.
_NOOP_FLAGS = frozenset("duv")
_LOOP_FLAGS = frozenset("gy")
_BACKREFERENCE_RE = re.compile(r"\\k<(\w+)>")


class CompiledPattern(NamedTuple):
    regex: re.Pattern[str]
    is_global: bool
    sticky: bool


def compile_pattern(pattern: str, flags: str = "") -> CompiledPattern:
    """Compile ``pattern`` with flags written the JavaScript way (``"gim"``).

    Named groups may be written ``(?<name>...)`` and referenced as
    ``\\k<name>``; both are rewritten to their :mod:`re` spelling.

    Raises
    ------
    PatternError
        For unknown or repeated flags, ``u`` combined with ``v``, or a pattern
        Python's :mod:`re` cannot compile.
    """

    re_flags = 0
    for flag in flags:
        if flag in _FLAG_MAP:
            re_flags |= _FLAG_MAP[flag]
        elif flag not in _NOOP_FLAGS and flag not in _LOOP_FLAGS:
            raise PatternError(f"Invalid flags supplied: {flags!r}")
    if len(set(flags)) != len(flags) or ("u" in flags and "v" in flags):
        raise PatternError(f"Invalid flags supplied: {flags!r}")

    try:
        regex = re.compile(_translate_named_groups(pattern), re_flags)
    except re.error as exc:
        raise PatternError(str(exc)) from exc
    return CompiledPattern(regex=regex, is_global="g" in flags, sticky="y" in flags)


def test_regex(pattern: str, text: str, flags: str = "g") -> RegexResult:
    """Collect the matches of ``pattern`` in ``text``.

    With the ``g`` flag every match is returned; a zero-width match moves the
    search position one character forward so the scan always terminates.
    Without it at most the first match is returned. Compilation failures are
    reported through :attr:`RegexResult.error`, never raised.
    """

    try:
        compiled = compile_pattern(pattern, flags)
    except PatternError as exc:
        logger.debug("Rejected pattern %r with flags %r: %s", pattern, flags, exc)
        return RegexResult(matches=(), error=f"Invalid regex: {exc}")

    matches: List[RegexMatch] = []
    offsets = _CodeUnitOffsets(text)
    position = 0
    while position <= len(text):
        if compiled.sticky:
            found = compiled.regex.match(text, position)
        else:
            found = compiled.regex.search(text, position)
        if found is None:
            break
        matches.append(
            RegexMatch(
                match=found.group(0),
                index=offsets.at(found.start()),
                groups=found.groups(),
            )
        )
        if not compiled.is_global:
            break
        position = found.end()
        if found.end() == found.start():
            position += 1

    logger.debug("Pattern %r matched %d time(s)", pattern, len(matches))
    return RegexResult(matches=tuple(matches))


# Keep pytest from collecting the public tester as a test function.
test_regex.__test__ = False  # type: ignore[attr-defined]


class _CodeUnitOffsets:
    """Translate code point indexes into UTF-16 code unit offsets.

    Match positions only move forward, so the conversion is incremental.
    """

    def __init__(self, text: str) -> None:
        self._text = text
        self._index = 0
        self._extra = 0

    def at(self, index: int) -> int:
        if index < self._index:
            self._index = 0
            self._extra = 0
        for ch in self._text[self._index:index]:
            if ord(ch) > 0xFFFF:
                self._extra += 1
        self._index = index
        return index + self._extra


def _translate_named_groups(pattern: str) -> str:
    """Rewrite ``(?<name>`` and ``\\k<name>`` outside character classes."""

    pieces: List[str] = []
    in_class = False
    index = 0
    while index < len(pattern):
        ch = pattern[index]
        if ch == "\\":
            reference = None if in_class else _BACKREFERENCE_RE.match(pattern, index)
            if reference is not None:
                pieces.append(f"(?P={reference.group(1)})")
                index = reference.end()
            else:
                pieces.append(pattern[index : index + 2])
                index += 2
            continue
        if in_class:
            in_class = ch != "]"
        elif ch == "[":
            in_class = True
        elif pattern.startswith("(?<", index) and pattern[index + 3 : index + 4] not in ("=", "!"):
            pieces.append("(?P<")
            index += 3
            continue
        pieces.append(ch)
        index += 1
    return "".join(pieces)

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple


class PatternError(ValueError):
    """Raised when a regular expression or its flags cannot be compiled."""


class ChangeType(str, Enum):
    """Kinds of rows emitted by the line diff."""

    NORMAL = "normal"
    ADD = "add"
    REMOVE = "remove"


class SortType(str, Enum):
    """Comparison keys supported by :func:`devtext.sort.sort_text`."""

    ALPHABETICAL = "alphabetical"
    NUMERICAL = "numerical"
    LENGTH = "length"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class DiffConfig:
    """Configuration for the line diff.

    ``similarity_threshold`` is the token-overlap score two differing lines
    must strictly exceed to be shown as a modification with word-level
    highlighting instead of an unrelated remove/add pair.

    ``escape_html`` HTML-escapes token text inside ``highlighted_content``;
    by default tokens are emitted as written.
    """

    similarity_threshold: float = 0.3
    highlight_class: str = "diff-word-modified"
    escape_html: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.similarity_threshold <= 1.0:
            raise ValueError("similarity_threshold must be between 0 and 1")


@dataclass(frozen=True)
class WordToken:
    """A token of the newer line and whether it differs from the older one."""

    text: str
    changed: bool = False


@dataclass(frozen=True)
class DiffLine:
    """Represents a single row of the line diff."""

    kind: ChangeType
    content: str
    line_number: int
    highlighted_content: str | None = None
    tokens: Tuple[WordToken, ...] = ()

    @property
    def is_modified(self) -> bool:
        """True for the ``add`` half of a modified pair."""

        return self.highlighted_content is not None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.kind.value,
            "content": self.content,
            "lineNumber": self.line_number,
        }
        if self.highlighted_content is not None:
            data["highlightedContent"] = self.highlighted_content
        return data


@dataclass(frozen=True)
class DiffStats:
    """Aggregate counters accompanying a diff."""

    lines_added: int = 0
    lines_removed: int = 0
    lines_modified: int = 0
    characters_added: int = 0
    characters_removed: int = 0
    characters_modified: int = 0

    @property
    def has_changes(self) -> bool:
        return bool(self.lines_added or self.lines_removed or self.lines_modified)

    def as_dict(self) -> Dict[str, int]:
        return {
            "linesAdded": self.lines_added,
            "linesRemoved": self.lines_removed,
            "linesModified": self.lines_modified,
            "charactersAdded": self.characters_added,
            "charactersRemoved": self.characters_removed,
            "charactersModified": self.characters_modified,
        }


@dataclass(frozen=True)
class DiffResult:
    """Container for the full diff between two texts."""

    lines: Tuple[DiffLine, ...]
    stats: DiffStats = field(default_factory=DiffStats)

    @property
    def has_changes(self) -> bool:
        """Return True when the diff captured at least one change."""

        return any(line.kind is not ChangeType.NORMAL for line in self.lines)

    def as_dict(self) -> Dict[str, Any]:
        return {
            "diff": [line.as_dict() for line in self.lines],
            "stats": self.stats.as_dict(),
        }


@dataclass(frozen=True)
class RegexMatch:
    """One match found by the regex tester.

    ``index`` counts UTF-16 code units so offsets agree with browser callers.
    Unmatched optional groups are ``None``.
    """

    match: str
    index: int
    groups: Tuple[str | None, ...] = ()

    def as_dict(self) -> Dict[str, Any]:
        return {"match": self.match, "index": self.index, "groups": list(self.groups)}


@dataclass(frozen=True)
class RegexResult:
    matches: Tuple[RegexMatch, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"matches": [match.as_dict() for match in self.matches]}
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class TextStats:
    """Counts derived from a block of text."""

    characters: int = 0
    characters_no_spaces: int = 0
    words: int = 0
    sentences: int = 0
    paragraphs: int = 0
    lines: int = 0
    bytes: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {
            "characters": self.characters,
            "charactersNoSpaces": self.characters_no_spaces,
            "words": self.words,
            "sentences": self.sentences,
            "paragraphs": self.paragraphs,
            "lines": self.lines,
            "bytes": self.bytes,
        }


@dataclass(frozen=True)
class ReplaceResult:
    """Outcome of a search and replace run."""

    text: str
    match_count: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

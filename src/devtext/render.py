"""Rendering helpers for presenting diff results as text."""

from __future__ import annotations

from typing import List

from .models import ChangeType, DiffLine, DiffResult

_PREFIXES = {
    ChangeType.NORMAL: " ",
    ChangeType.REMOVE: "-",
    ChangeType.ADD: "+",
}


def render_unified(diff_result: DiffResult) -> str:
    """Render a :class:`DiffResult` as unified-style text.

    Parameters
    ----------
    diff_result:
        Structured diff output produced by :func:`devtext.compute_text_diff`.

    Returns
    -------
    str
        One line per diff row prefixed with ``" "``, ``"-"`` or ``"+"``.
        Changed words on the new half of a modified pair are wrapped in
        ``{+ +}`` markers.
    """

    rendered_lines: List[str] = []

    for line in diff_result.lines:
        prefix = _PREFIXES.get(line.kind)
        if prefix is None:  # pragma: no cover - defensive guard
            raise ValueError(f"Unsupported line kind: {line.kind}")
        body = _render_tokens(line) if line.is_modified else line.content
        rendered_lines.append(f"{prefix}{body}\n")

    return "".join(rendered_lines)


def _render_tokens(line: DiffLine) -> str:
    """Render the word tokens of a modified line."""
    if not line.tokens:
        return line.content
    return "".join(
        f"{{+{token.text}+}}" if token.changed else token.text
        for token in line.tokens
    )

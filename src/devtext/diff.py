"""Positional line diff with word-level highlighting for modified lines."""

from __future__ import annotations

import logging
from typing import List

from .inline import render_word_tokens, word_diff_tokens
from .models import ChangeType, DiffConfig, DiffLine, DiffResult, DiffStats
from .similarity import line_similarity
from .stats import code_unit_length

logger = logging.getLogger(__name__)


def compute_text_diff(
    text1: str,
    text2: str,
    *,
    config: DiffConfig | None = None,
) -> DiffResult:
    """Compare two texts line by line.

    Lines are walked with one cursor per text and are never realigned: an
    inserted or deleted line shifts every following pair, which is reported
    as a run of modified or replaced lines. Differing lines whose similarity
    exceeds ``config.similarity_threshold`` become a ``remove`` row followed
    by an ``add`` row carrying ``highlighted_content``; otherwise they are an
    unrelated remove/add pair.

    Parameters
    ----------
    text1:
        The original text.
    text2:
        The updated text.
    config:
        Optional threshold and marker settings. Defaults to :class:`DiffConfig`.
    """

    cfg = config or DiffConfig()
    lines1 = text1.split("\n")
    lines2 = text2.split("\n")
    logger.debug("Diffing %d against %d lines", len(lines1), len(lines2))

    rows: List[DiffLine] = []
    counters = dict.fromkeys(
        (
            "lines_added",
            "lines_removed",
            "lines_modified",
            "characters_added",
            "characters_removed",
            "characters_modified",
        ),
        0,
    )

    i = j = 0
    line_number = 1
    while i < len(lines1) or j < len(lines2):
        if i >= len(lines1):
            rows.append(DiffLine(ChangeType.ADD, lines2[j], line_number))
            counters["lines_added"] += 1
            counters["characters_added"] += code_unit_length(lines2[j])
            j += 1
        elif j >= len(lines2):
            rows.append(DiffLine(ChangeType.REMOVE, lines1[i], line_number))
            counters["lines_removed"] += 1
            counters["characters_removed"] += code_unit_length(lines1[i])
            i += 1
        elif lines1[i] == lines2[j]:
            rows.append(DiffLine(ChangeType.NORMAL, lines1[i], line_number))
            i += 1
            j += 1
        else:
            rows.extend(_build_changed_pair(lines1[i], lines2[j], line_number, cfg, counters))
            i += 1
            j += 1
        line_number += 1

    stats = DiffStats(**counters)
    logger.debug("Diff produced %d rows: %s", len(rows), stats)
    return DiffResult(lines=tuple(rows), stats=stats)


def _build_changed_pair(
    old: str,
    new: str,
    line_number: int,
    config: DiffConfig,
    counters: dict,
) -> tuple[DiffLine, DiffLine]:
    old_length = code_unit_length(old)
    new_length = code_unit_length(new)
    counters["characters_removed"] += old_length
    counters["characters_added"] += new_length

    if line_similarity(old, new) > config.similarity_threshold:
        tokens = word_diff_tokens(old, new)
        counters["lines_modified"] += 1
        counters["characters_modified"] += abs(new_length - old_length)
        return (
            DiffLine(ChangeType.REMOVE, old, line_number),
            DiffLine(
                ChangeType.ADD,
                new,
                line_number,
                highlighted_content=render_word_tokens(
                    tokens,
                    marker_class=config.highlight_class,
                    escape_html=config.escape_html,
                ),
                tokens=tokens,
            ),
        )

    counters["lines_removed"] += 1
    counters["lines_added"] += 1
    return (
        DiffLine(ChangeType.REMOVE, old, line_number),
        DiffLine(ChangeType.ADD, new, line_number),
    )

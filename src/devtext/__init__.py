"""devtext package."""

import logging

from .diff import compute_text_diff
from .inline import word_diff, word_diff_tokens
from .models import (
    ChangeType,
    DiffConfig,
    DiffLine,
    DiffResult,
    DiffStats,
    PatternError,
    RegexMatch,
    RegexResult,
    ReplaceResult,
    SortOrder,
    SortType,
    TextStats,
    WordToken,
)
from .regex import compile_pattern, test_regex
from .render import render_unified
from .render_html import HtmlRenderOptions, default_html_styles, render_html
from .replace import search_replace
from .similarity import line_similarity
from .sort import sort_text
from .split import split_text
from .stats import count_text_stats

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "compute_text_diff",
    "line_similarity",
    "word_diff",
    "word_diff_tokens",
    "count_text_stats",
    "compile_pattern",
    "test_regex",
    "sort_text",
    "split_text",
    "search_replace",
    "render_unified",
    "render_html",
    "HtmlRenderOptions",
    "default_html_styles",
    "ChangeType",
    "DiffConfig",
    "DiffLine",
    "DiffResult",
    "DiffStats",
    "WordToken",
    "PatternError",
    "RegexMatch",
    "RegexResult",
    "ReplaceResult",
    "SortOrder",
    "SortType",
    "TextStats",
]

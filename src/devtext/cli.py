"""Command-line interface for the devtext library."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable

from .diff import compute_text_diff
from .models import DiffConfig, SortOrder, SortType
from .regex import test_regex
from .render import render_unified
from .render_html import render_html
from .replace import search_replace
from .sort import sort_text
from .split import split_text
from .stats import count_text_stats


def main(argv: Iterable[str] | None = None) -> int:
    """Entry point for the ``devtext`` CLI."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    return args.handler(parser, args)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="devtext",
        description="Developer text tools: diff, statistics, regex, sort, split and replace.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Write debug logging to stderr.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_resolve_version()}",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    diff_parser = commands.add_parser("diff", help="Compare two texts line by line.")
    diff_parser.add_argument("left", help="Path to the original text or '-' for stdin")
    diff_parser.add_argument("right", help="Path to the updated text or '-' for stdin")
    diff_parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Similarity a changed line must exceed to get word highlighting (default: 0.3).",
    )
    diff_parser.add_argument(
        "--format",
        choices=("text", "html", "json"),
        default="text",
        help="Output format for changes (default: text).",
    )
    diff_parser.set_defaults(handler=_run_diff)

    stats_parser = commands.add_parser("stats", help="Count characters, words, lines and bytes.")
    stats_parser.add_argument("input", nargs="?", default="-", help="Path to the text or '-' for stdin")
    stats_parser.add_argument("--json", action="store_true", help="Emit JSON.")
    stats_parser.set_defaults(handler=_run_stats)

    regex_parser = commands.add_parser("regex", help="List the matches of a regular expression.")
    regex_parser.add_argument("pattern", help="Regular expression to test")
    regex_parser.add_argument("input", nargs="?", default="-", help="Path to the text or '-' for stdin")
    regex_parser.add_argument("--flags", default="g", help="JavaScript-style flags (default: g).")
    regex_parser.add_argument("--json", action="store_true", help="Emit JSON.")
    regex_parser.set_defaults(handler=_run_regex)

    sort_parser = commands.add_parser("sort", help="Sort lines.")
    sort_parser.add_argument("input", nargs="?", default="-", help="Path to the text or '-' for stdin")
    sort_parser.add_argument(
        "--type",
        dest="sort_type",
        choices=[item.value for item in SortType],
        default=SortType.ALPHABETICAL.value,
        help="Comparison key (default: alphabetical).",
    )
    sort_parser.add_argument(
        "--order",
        choices=[item.value for item in SortOrder],
        default=SortOrder.ASC.value,
        help="Sort direction (default: asc).",
    )
    sort_parser.add_argument("--case-sensitive", action="store_true", help="Compare case-sensitively.")
    sort_parser.set_defaults(handler=_run_sort)

    split_parser = commands.add_parser("split", help="Split text on a delimiter, one part per line.")
    split_parser.add_argument("input", nargs="?", default="-", help="Path to the text or '-' for stdin")
    split_parser.add_argument(
        "--delimiter",
        default=",",
        help="Delimiter; '\\n' and '\\t' mean newline and tab (default: ',').",
    )
    split_parser.add_argument("--keep-whitespace", action="store_true", help="Do not trim parts.")
    split_parser.add_argument("--keep-empty", action="store_true", help="Keep empty parts.")
    split_parser.set_defaults(handler=_run_split)

    replace_parser = commands.add_parser("replace", help="Search and replace.")
    replace_parser.add_argument("search", help="Text or pattern to search for")
    replace_parser.add_argument("replacement", help="Replacement; supports $&, $1 and $<name>")
    replace_parser.add_argument("input", nargs="?", default="-", help="Path to the text or '-' for stdin")
    replace_parser.add_argument("--regex", action="store_true", help="Treat SEARCH as a regular expression.")
    replace_parser.add_argument("--case-sensitive", action="store_true", help="Match case-sensitively.")
    replace_parser.add_argument("--first-only", action="store_true", help="Replace the first match only.")
    replace_parser.set_defaults(handler=_run_replace)

    return parser


def _run_diff(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    if args.left == "-" and args.right == "-":
        parser.error("Cannot read both inputs from stdin")

    left_text = _load_input(args.left)
    right_text = _load_input(args.right)

    try:
        config = _build_diff_config(args)
    except ValueError as exc:
        parser.error(str(exc))

    result = compute_text_diff(left_text, right_text, config=config)

    if args.format == "json":
        _write(json.dumps(result.as_dict(), indent=2))
    elif result.has_changes:
        output = render_unified(result) if args.format == "text" else render_html(result)
        _write(output)
    return 1 if result.has_changes else 0


def _run_stats(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    stats = count_text_stats(_load_input(args.input))
    if args.json:
        _write(json.dumps(stats.as_dict(), indent=2))
    else:
        width = max(len(name) for name in stats.as_dict())
        _write("\n".join(f"{name:<{width}}  {value}" for name, value in stats.as_dict().items()))
    return 0


def _run_regex(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    result = test_regex(args.pattern, _load_input(args.input), args.flags)
    if args.json:
        _write(json.dumps(result.as_dict(), indent=2))
    elif result.ok:
        lines = [f"{match.index}\t{match.match!r}" for match in result.matches]
        _write("\n".join(lines))
    if not result.ok:
        sys.stderr.write(f"{result.error}\n")
        return 2
    return 0


def _run_sort(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    _write(sort_text(_load_input(args.input), args.sort_type, args.order, args.case_sensitive))
    return 0


def _run_split(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    parts = split_text(
        _load_input(args.input),
        args.delimiter,
        trim_whitespace=not args.keep_whitespace,
        remove_empty=not args.keep_empty,
    )
    _write("\n".join(parts))
    return 0


def _run_replace(parser: argparse.ArgumentParser, args: argparse.Namespace) -> int:
    result = search_replace(
        _load_input(args.input),
        args.search,
        args.replacement,
        is_regex=args.regex,
        case_sensitive=args.case_sensitive,
        replace_all=not args.first_only,
    )
    if not result.ok:
        parser.error(result.error)
    sys.stdout.write(result.text)
    return 0


def _load_input(identifier: str) -> str:
    if identifier == "-":
        return sys.stdin.read()
    return Path(identifier).read_text(encoding="utf-8")


def _write(output: str) -> None:
    if output:
        sys.stdout.write(output)
        if not output.endswith("\n"):
            sys.stdout.write("\n")


def _build_diff_config(args: argparse.Namespace) -> DiffConfig | None:
    if args.threshold is None:
        return None
    return DiffConfig(similarity_threshold=args.threshold)


def _resolve_version() -> str:
    from importlib.metadata import PackageNotFoundError, version

    try:
        return version("devtext")
    except PackageNotFoundError:
        return "0.0.0"


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())

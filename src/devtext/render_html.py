"""HTML rendering utilities for text diffs."""

from __future__ import annotations

from dataclasses import dataclass
from html import escape

from .inline import render_word_tokens
from .models import ChangeType, DiffLine, DiffResult


@dataclass(frozen=True)
class HtmlRenderOptions:
    """Tunable options for HTML diff rendering."""

    include_styles: bool = True
    class_prefix: str = "devtext"
    show_line_numbers: bool = True


def render_html(diff_result: DiffResult, options: HtmlRenderOptions | None = None) -> str:
    """Render a diff result as annotated HTML.

    Modified lines are rebuilt from their word tokens with changed words in
    ``<mark>``. All line text is escaped, whatever ``DiffConfig.escape_html``
    was when the diff was computed.

    Parameters
    ----------
    diff_result:
        The diff computation output to render.
    options:
        Optional rendering tweaks. When omitted, sensible defaults are used.
    """

    opts = options or HtmlRenderOptions()
    classes = _ClassRegistry(opts.class_prefix)

    parts: list[str] = []
    if opts.include_styles:
        parts.append(f'<style type="text/css">{default_html_styles(classes.prefix)}</style>')

    parts.append(f'<div class="{classes.root}">')
    for line in diff_result.lines:
        parts.append(_render_line_html(line, classes, opts))
    parts.append("</div>")
    return "".join(parts)


def default_html_styles(class_prefix: str = "devtext") -> str:
    """Return the default CSS used by ``render_html``.

    Changing ``class_prefix`` lets callers embed several rendered diffs on the
    same page without collisions.
    """

    prefix = _normalize_prefix(class_prefix)
    return (
        f".{prefix}-diff {{\n"
        f"  font-family: var(--{prefix}-font, SFMono-Regular, Menlo, Consolas, monospace);\n"
        f"  font-size: 13px;\n"
        f"  line-height: 1.45;\n"
        f"  border: 1px solid var(--{prefix}-border, #d2d6dc);\n"
        f"  border-radius: 6px;\n"
        f"}}\n"
        f".{prefix}-line {{\n"
        f"  display: grid;\n"
        f"  grid-template-columns: minmax(3ch, auto) minmax(2ch, auto) 1fr;\n"
        f"  gap: 8px;\n"
        f"  padding: 2px 12px;\n"
        f"  white-space: pre-wrap;\n"
        f"  word-break: break-word;\n"
        f"}}\n"
        f".{prefix}-line--add {{\n"
        f"  background: var(--{prefix}-add-background, #e6ffed);\n"
        f"}}\n"
        f".{prefix}-line--remove {{\n"
        f"  background: var(--{prefix}-remove-background, #ffeef0);\n"
        f"}}\n"
        f".{prefix}-gutter {{\n"
        f"  text-align: right;\n"
        f"  color: var(--{prefix}-gutter-foreground, #6b7280);\n"
        f"}}\n"
        f".{prefix}-gutter--hidden {{\n"
        f"  visibility: hidden;\n"
        f"}}\n"
        f".{prefix}-word {{\n"
        f"  background: var(--{prefix}-word-background, #fde68a);\n"
        f"}}\n"
    )


def _render_line_html(line: DiffLine, classes: _ClassRegistry, opts: HtmlRenderOptions) -> str:
    line_classes = [classes.line, classes.line_kind(line.kind)]
    if line.is_modified:
        line_classes.append(classes.line_modified)
    attrs = [
        f'class="{" ".join(line_classes)}"',
        f'data-change-kind="{line.kind.value}"',
        f'data-lineno="{line.line_number}"',
    ]

    gutter_classes = [classes.gutter]
    if not opts.show_line_numbers:
        gutter_classes.append(classes.gutter_hidden)
    number = str(line.line_number) if opts.show_line_numbers else ""
    gutter = f'<span class="{" ".join(gutter_classes)}">{number}</span>'

    marker = f'<span class="{classes.marker}">{_MARKERS[line.kind]}</span>'

    if line.is_modified and line.tokens:
        body = render_word_tokens(line.tokens, marker_class=classes.word, escape_html=True)
    else:
        body = escape(line.content)
    content = f'<span class="{classes.content}">{body}</span>'

    return f'<div {" ".join(attrs)}>{gutter}{marker}{content}</div>'


_MARKERS = {
    ChangeType.NORMAL: "",
    ChangeType.ADD: "+",
    ChangeType.REMOVE: "-",
}


class _ClassRegistry:
    """Helper for constructing namespaced CSS classes."""

    def __init__(self, prefix: str) -> None:
        self.prefix = _normalize_prefix(prefix)
        self.root = f"{self.prefix}-diff"
        self.line = f"{self.prefix}-line"
        self.line_modified = f"{self.prefix}-line--modified"
        self.gutter = f"{self.prefix}-gutter"
        self.gutter_hidden = f"{self.prefix}-gutter--hidden"
        self.marker = f"{self.prefix}-marker"
        self.content = f"{self.prefix}-content"
        self.word = f"{self.prefix}-word"

    def line_kind(self, kind: ChangeType) -> str:
        return f"{self.prefix}-line--{kind.value}"


def _normalize_prefix(prefix: str) -> str:
    cleaned = (prefix or "devtext").strip()
    sanitized = "".join(ch for ch in cleaned if ch.isalnum() or ch in "-_")
    return sanitized or "devtext"

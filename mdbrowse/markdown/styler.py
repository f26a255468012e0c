"""Line-oriented Markdown styling state machine.

Converts raw Markdown into styled lines in a single forward pass. The only
state carried between lines is whether a fenced code block is open and the
language tag it was opened with. Everything outside a fence gets at most one
whole-line rule, picked in priority order; inline code spans are the only
rule that styles parts of a line.

This is deliberately not a Markdown parser: no nesting, no links, no tables.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..ui_theme import UITheme
from .serialize import serialize_ansi, serialize_plain
from .spans import (
    PLAIN,
    ROLE_CODE,
    ROLE_EMPHASIS,
    ROLE_FENCE_DIVIDER,
    ROLE_FENCE_LABEL,
    ROLE_HEADING1,
    ROLE_HEADING2,
    ROLE_HEADING3,
    ROLE_STRONG,
    SpanStyle,
    StyledLine,
    StyledSpan,
)

FENCE_MARKER = "```"
DIVIDER_WIDTH = 46
DIVIDER_TEXT = "━" * DIVIDER_WIDTH

HEADING1_STYLE = SpanStyle(bold=True, underline=True, role=ROLE_HEADING1)
HEADING2_STYLE = SpanStyle(bold=True, role=ROLE_HEADING2)
HEADING3_STYLE = SpanStyle(underline=True, role=ROLE_HEADING3)
STRONG_STYLE = SpanStyle(bold=True, role=ROLE_STRONG)
EMPHASIS_STYLE = SpanStyle(italic=True, role=ROLE_EMPHASIS)
INLINE_CODE_STYLE = SpanStyle(bold=True, dim=True, role=ROLE_CODE)
FENCE_LABEL_STYLE = SpanStyle(bold=True, role=ROLE_FENCE_LABEL)
FENCE_DIVIDER_STYLE = SpanStyle(dim=True, role=ROLE_FENCE_DIVIDER)

# Checked in order; the first matching prefix wins.
_HEADING_PREFIXES: tuple[tuple[str, SpanStyle], ...] = (
    ("# ", HEADING1_STYLE),
    ("## ", HEADING2_STYLE),
    ("### ", HEADING3_STYLE),
)
_WRAPPED_MARKERS: tuple[tuple[str, SpanStyle], ...] = (
    ("**", STRONG_STYLE),
    ("__", EMPHASIS_STYLE),
)


@dataclass
class StyleState:
    """Per-conversion fence state."""

    inside_fence: bool = False
    fence_language: str = ""


def split_source_lines(text: str) -> list[str]:
    """Split ``text`` on newlines the way a line scanner reads it.

    A final newline does not start an extra empty line, a trailing partial
    line is kept, and one trailing ``\\r`` per line is dropped.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _single(text: str, style: SpanStyle) -> StyledLine:
    return (StyledSpan(text, style),)


def divider_line() -> StyledLine:
    return _single(DIVIDER_TEXT, FENCE_DIVIDER_STYLE)


def inline_code_spans(line: str) -> StyledLine:
    """Split ``line`` on backticks; odd segments are inline code.

    Unbalanced backticks still alternate, so a lone trailing backtick styles
    the rest of the line. Empty segments produce no span.
    """
    spans: list[StyledSpan] = []
    for idx, section in enumerate(line.split("`")):
        if not section:
            continue
        spans.append(StyledSpan(section, INLINE_CODE_STYLE if idx % 2 else PLAIN))
    return tuple(spans)


def style_prose_line(line: str) -> StyledLine:
    """Apply the first matching whole-line rule to a line outside any fence."""
    for prefix, style in _HEADING_PREFIXES:
        if line.startswith(prefix):
            return _single(line[len(prefix):], style)

    for marker, style in _WRAPPED_MARKERS:
        if len(line) >= 2 * len(marker) and line.startswith(marker) and line.endswith(marker):
            return _single(line[len(marker):-len(marker)], style)

    if "`" in line:
        return inline_code_spans(line)

    if not line:
        return ()
    return _single(line, PLAIN)


def style_line(line: str, state: StyleState) -> list[StyledLine]:
    """Advance ``state`` by one source line and return the lines it emits.

    Fence delimiters emit zero text of their own: an opening delimiter becomes
    a language label plus a divider, a closing one becomes a divider.
    """
    if line.startswith(FENCE_MARKER):
        if state.inside_fence:
            state.inside_fence = False
            state.fence_language = ""
            return [divider_line()]
        state.inside_fence = True
        state.fence_language = line[len(FENCE_MARKER):].strip()
        label: StyledLine = _single(state.fence_language, FENCE_LABEL_STYLE) if state.fence_language else ()
        return [label, divider_line()]

    if state.inside_fence:
        return [_single(line, PLAIN)] if line else [()]

    return [style_prose_line(line)]


def style_markdown_lines(text: str) -> list[StyledLine]:
    """Convert Markdown ``text`` into styled lines.

    An unterminated fence leaves the rest of the document verbatim.
    """
    state = StyleState()
    out: list[StyledLine] = []
    for line in split_source_lines(text):
        out.extend(style_line(line, state))
    return out


def style_markdown(text: str, theme: UITheme | None = None, no_color: bool = False) -> str:
    """Convert Markdown ``text`` into newline-terminated terminal text."""
    lines = style_markdown_lines(text)
    if no_color:
        return serialize_plain(lines)
    return serialize_ansi(lines, theme)

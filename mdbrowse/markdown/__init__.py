"""Markdown-to-terminal styling.

``style_markdown`` is the one-call entry point; ``style_markdown_lines``
exposes the styled-span form for renderers that serialize on their own.
"""

from __future__ import annotations

from .serialize import serialize_ansi, serialize_plain
from .spans import PLAIN, SpanStyle, StyledLine, StyledSpan, line_text
from .styler import (
    DIVIDER_TEXT,
    FENCE_MARKER,
    StyleState,
    split_source_lines,
    style_line,
    style_markdown,
    style_markdown_lines,
)

__all__ = [
    "DIVIDER_TEXT",
    "FENCE_MARKER",
    "PLAIN",
    "SpanStyle",
    "StyleState",
    "StyledLine",
    "StyledSpan",
    "line_text",
    "serialize_ansi",
    "serialize_plain",
    "split_source_lines",
    "style_line",
    "style_markdown",
    "style_markdown_lines",
]

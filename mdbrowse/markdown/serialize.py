"""Serializers turning styled lines into terminal text.

The styler only produces spans; these functions decide the concrete escape
sequences. Every styled span is closed with a reset so styling never carries
over into the next span or line.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..ui_theme import DEFAULT_THEME, UITheme
from .spans import (
    ROLE_CODE,
    ROLE_FENCE_DIVIDER,
    ROLE_FENCE_LABEL,
    ROLE_HEADING1,
    ROLE_HEADING2,
    ROLE_HEADING3,
    SpanStyle,
    StyledLine,
)

SGR_BOLD = "\033[1m"
SGR_DIM = "\033[2m"
SGR_ITALIC = "\033[3m"
SGR_UNDERLINE = "\033[4m"


def _role_color(role: str, theme: UITheme) -> str:
    return {
        ROLE_HEADING1: theme.md_heading1,
        ROLE_HEADING2: theme.md_heading2,
        ROLE_HEADING3: theme.md_heading3,
        ROLE_CODE: theme.md_code,
        ROLE_FENCE_LABEL: theme.md_fence_label,
        ROLE_FENCE_DIVIDER: theme.md_fence_divider,
    }.get(role, "")


def sgr_for(style: SpanStyle, theme: UITheme | None = None) -> str:
    """Return the opening escape sequence(s) for ``style``."""
    active_theme = theme or DEFAULT_THEME
    parts: list[str] = []
    if style.bold:
        parts.append(SGR_BOLD)
    if style.dim:
        parts.append(SGR_DIM)
    if style.italic:
        parts.append(SGR_ITALIC)
    if style.underline:
        parts.append(SGR_UNDERLINE)
    parts.append(_role_color(style.role, active_theme))
    return "".join(parts)


def serialize_line_ansi(line: StyledLine, theme: UITheme | None = None) -> str:
    """Serialize one styled line without its newline."""
    active_theme = theme or DEFAULT_THEME
    out: list[str] = []
    for span in line:
        if span.style.is_plain:
            out.append(span.text)
            continue
        opening = sgr_for(span.style, active_theme)
        if not opening:
            out.append(span.text)
            continue
        out.append(f"{opening}{span.text}{active_theme.reset}")
    return "".join(out)


def serialize_ansi(lines: Iterable[StyledLine], theme: UITheme | None = None) -> str:
    """Serialize styled lines as ANSI text, one ``\\n``-terminated row each."""
    return "".join(serialize_line_ansi(line, theme) + "\n" for line in lines)


def serialize_plain(lines: Iterable[StyledLine]) -> str:
    """Serialize styled lines with all styling dropped."""
    return "".join("".join(span.text for span in line) + "\n" for line in lines)

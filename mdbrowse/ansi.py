"""ANSI-aware text measurement and line shaping utilities.

Clipping and wrapping keep escape sequences intact so styled preview lines
can be fitted into a pane without losing or splitting their colors.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8


def strip_ansi(text: str) -> str:
    """Remove SGR/CSI escape sequences from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return visible column count of ``text`` ignoring escape sequences."""
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    Escape sequences are kept verbatim and do not count toward width. Tabs are
    expanded into spaces so clipping aligns with rendered terminal cells.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n and col < max_cols:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > max_cols:
            break
        out.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` and right-pad it with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    padding = max(0, width - display_width(clipped))
    return clipped + " " * padding


def wrap_ansi_line(text: str, width: int) -> list[str]:
    """Wrap a styled line into chunks that fit ``width`` display columns.

    The SGR state active at a wrap point is re-emitted at the start of the
    next chunk, so a wrapped heading stays styled on every row.
    """
    if width <= 0 or not text:
        return [""]

    wrapped: list[str] = []
    chunk: list[str] = []
    active_sgr: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                sequence = match.group(0)
                chunk.append(sequence)
                if sequence == "\033[0m":
                    active_sgr = []
                elif sequence.endswith("m"):
                    active_sgr.append(sequence)
                i = match.end()
                continue

        ch = text[i]
        w = char_display_width(ch, col)
        if col + w > width and col > 0:
            if active_sgr:
                chunk.append("\033[0m")
            wrapped.append("".join(chunk))
            chunk = list(active_sgr)
            col = 0
            w = char_display_width(ch, col)
        chunk.append(" " * w if ch == "\t" else ch)
        col += w
        i += 1

    wrapped.append("".join(chunk))
    return wrapped


def build_screen_lines(rendered: str, width: int, wrap: bool = True) -> list[str]:
    """Split rendered output into displayable screen lines without terminators.

    When ``wrap`` is true each logical line is wrapped with
    :func:`wrap_ansi_line`; otherwise lines are returned as-is.
    """
    lines = rendered.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if not lines:
        return [""]
    if not wrap:
        return lines

    out: list[str] = []
    for line in lines:
        out.extend(wrap_ansi_line(line, width))
    return out

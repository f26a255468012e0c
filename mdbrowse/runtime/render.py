"""Frame composition for the tree view and the split preview view.

``compose_frame`` reads a ``BrowserSession`` and returns the full
escape-sequence frame; the only state it touches is the wrapped-preview
cache. ``render_frame`` writes that frame to the terminal.
"""

from __future__ import annotations

import os
import sys

from ..ansi import build_screen_lines, clip_ansi_line, pad_ansi_line
from ..markdown.serialize import serialize_line_ansi
from ..markdown.spans import line_text
from ..tree_model import clamp_left_width, compute_left_width, format_tree_row
from ..ui_theme import DEFAULT_THEME, UITheme
from .state import BrowserSession

PANE_DIVIDER = "│"
TREE_HINT = "Enter open  Ctrl+P/Ctrl+W preview  q quit"
PREVIEW_HINT = "Ctrl+P/Ctrl+W tree  ↑/↓ scroll  q quit"


def content_rows(height: int) -> int:
    """Rows available above the status line."""
    return max(1, height - 1)


def split_widths(width: int) -> tuple[int, int]:
    """Return ``(tree_width, preview_width)`` for the split view."""
    left = clamp_left_width(width, compute_left_width(width))
    right = max(1, width - left - len(PANE_DIVIDER))
    return left, right


def preview_screen_lines(
    session: BrowserSession,
    width: int,
    theme: UITheme | None = None,
    no_color: bool = False,
) -> list[str]:
    """Serialize and wrap the current preview to ``width`` columns.

    The wrapped lines stay cached on the session until the preview or the
    render settings change.
    """
    active_theme = theme or DEFAULT_THEME
    key = (id(session.preview_lines), len(session.preview_lines), session.preview_path, width, active_theme, no_color)
    if session.preview_wrap_key == key:
        return session.preview_wrapped
    if no_color:
        rendered = "".join(line_text(line) + "\n" for line in session.preview_lines)
    else:
        rendered = "".join(serialize_line_ansi(line, active_theme) + "\n" for line in session.preview_lines)
    session.preview_wrapped = build_screen_lines(rendered, width, wrap=True)
    session.preview_wrap_key = key
    return session.preview_wrapped


def update_viewport(
    session: BrowserSession,
    width: int,
    height: int,
    theme: UITheme | None = None,
    no_color: bool = False,
) -> None:
    """Recompute scroll bounds for the current terminal size.

    Keeps the selected tree row on screen and, while the preview is shown,
    clamps the preview scroll.
    """
    rows = content_rows(height)
    session.tree_view_rows = rows
    prev_tree_start = session.tree_start
    if session.selected_idx < session.tree_start:
        session.tree_start = session.selected_idx
    elif session.selected_idx >= session.tree_start + rows:
        session.tree_start = session.selected_idx - rows + 1
    session.tree_start = max(0, min(session.tree_start, max(0, len(session.rows) - rows)))
    if session.tree_start != prev_tree_start:
        session.dirty = True

    if not session.preview_visible:
        return
    _left, right = split_widths(width)
    total = len(preview_screen_lines(session, right, theme, no_color))
    session.preview_max_start = max(0, total - rows)
    if session.preview_start > session.preview_max_start:
        session.preview_start = session.preview_max_start
        session.dirty = True


def _tree_lines(
    session: BrowserSession,
    width: int,
    rows: int,
    theme: UITheme,
    no_color: bool,
    focused: bool,
) -> list[str]:
    out: list[str] = []
    for offset in range(rows):
        idx = session.tree_start + offset
        if idx >= len(session.rows):
            out.append(" " * width)
            continue
        text = format_tree_row(session.rows[idx], session.expanded, theme, no_color=no_color)
        if idx == session.selected_idx:
            plain = format_tree_row(session.rows[idx], session.expanded, no_color=True)
            text = pad_ansi_line(plain, width)
            if not no_color:
                marker = theme.reverse if focused else theme.divider + theme.reverse
                text = f"{marker}{text}{theme.reset}"
            out.append(text)
            continue
        out.append(pad_ansi_line(text, width))
    return out


def _status_line(
    session: BrowserSession,
    width: int,
    theme: UITheme,
    no_color: bool,
    now: float | None,
    visible_preview: tuple[int, int, int] | None,
) -> str:
    message_active = bool(session.status_message) and (now is None or now < session.status_message_until)
    if session.preview_visible and visible_preview is not None:
        first, last, total = visible_preview
        left = f" {session.preview_path or 'no file selected'} ({first}-{last}/{total})"
        right = PREVIEW_HINT
    else:
        left = f" {session.root.label}"
        right = TREE_HINT
    if message_active:
        left = f" {session.status_message}"
    text = f"{left} │ {right} "
    line = pad_ansi_line(text, width)
    if no_color:
        return line
    if message_active:
        return f"{theme.reverse}{theme.status_error}{line}{theme.reset}"
    return f"{theme.reverse}{line}{theme.reset}"


def compose_frame(
    session: BrowserSession,
    width: int,
    height: int,
    theme: UITheme | None = None,
    no_color: bool = False,
    now: float | None = None,
) -> str:
    """Build one complete frame for the current view."""
    active_theme = theme or DEFAULT_THEME
    width = max(1, width)
    rows = content_rows(height)
    body: list[str] = []
    visible_preview: tuple[int, int, int] | None = None

    if not session.preview_visible:
        body = _tree_lines(session, width, rows, active_theme, no_color, focused=True)
    else:
        left, right = split_widths(width)
        tree_lines = _tree_lines(session, left, rows, active_theme, no_color, focused=False)
        preview_lines = preview_screen_lines(session, right, active_theme, no_color)
        start = max(0, min(session.preview_start, max(0, len(preview_lines) - rows)))
        visible = preview_lines[start:start + rows]
        visible_preview = (start + 1 if visible else 0, start + len(visible), len(preview_lines))
        divider = PANE_DIVIDER if no_color else f"{active_theme.divider}{PANE_DIVIDER}{active_theme.reset}"
        for offset in range(rows):
            text = clip_ansi_line(visible[offset], right) if offset < len(visible) else ""
            if "\033" in text:
                text += active_theme.reset
            body.append(f"{tree_lines[offset]}{divider}{text}")

    status = _status_line(session, width, active_theme, no_color, now, visible_preview)
    return "\033[H\033[J" + "\r\n".join(body + [status])


def render_frame(
    session: BrowserSession,
    width: int,
    height: int,
    theme: UITheme | None = None,
    no_color: bool = False,
    now: float | None = None,
) -> None:
    frame = compose_frame(session, width, height, theme, no_color, now)
    os.write(sys.stdout.fileno(), frame.encode("utf-8", errors="replace"))

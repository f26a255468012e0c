"""Main interactive event loop for the terminal UI.

Each iteration refreshes viewport bounds for the current terminal size,
renders when something changed, then reads one key and dispatches the events
it maps to.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..fs import read_text
from ..ui_theme import UITheme
from .events import dispatch, events_for_key
from .keys import read_key
from .render import render_frame, update_viewport
from .state import BrowserSession
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 200


@dataclass(frozen=True)
class RuntimeLoopOptions:
    """Rendering and I/O hooks for ``run_main_loop``."""

    theme: UITheme | None = None
    no_color: bool = False
    read_file: Callable[[Path], str] = read_text
    key_reader: Callable[..., str] = read_key
    frame_renderer: Callable[..., None] = render_frame


def run_main_loop(
    session: BrowserSession,
    terminal: TerminalController,
    stdin_fd: int,
    options: RuntimeLoopOptions | None = None,
) -> None:
    """Run until a quit event is dispatched."""
    opts = options or RuntimeLoopOptions()
    last_size: tuple[int, int] | None = None

    with terminal.raw_mode():
        while not session.quit_requested:
            term = shutil.get_terminal_size((80, 24))
            now = time.monotonic()
            if (term.columns, term.lines) != last_size:
                last_size = (term.columns, term.lines)
                session.dirty = True
            if session.status_message and now >= session.status_message_until:
                session.status_message = ""
                session.status_message_until = 0.0
                session.dirty = True

            update_viewport(session, term.columns, term.lines, opts.theme, opts.no_color)
            if session.dirty:
                opts.frame_renderer(session, term.columns, term.lines, opts.theme, opts.no_color, now)
                session.dirty = False

            key = opts.key_reader(stdin_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if not key:
                continue
            for event in events_for_key(key, session, page_rows=max(1, session.tree_view_rows - 1)):
                dispatch(session, event, read_file=opts.read_file)

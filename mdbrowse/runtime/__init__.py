"""Interactive browser runtime.

Groups the session state, event dispatch, frame composition, and the
terminal loop. ``run_browser`` is imported lazily so importing the package
does not touch ``termios``.
"""

from __future__ import annotations

from .events import (
    CollapseDirectory,
    Event,
    ExpandDirectory,
    MoveSelection,
    NodeSelected,
    Quit,
    ScrollPreview,
    ToggleDirectory,
    ToggleView,
    dispatch,
    events_for_key,
)
from .state import BrowserSession


def run_browser(*args, **kwargs):
    """Lazily import browser entrypoint to avoid terminal setup on import."""
    from .app import run_browser as _run_browser

    return _run_browser(*args, **kwargs)


__all__ = [
    "BrowserSession",
    "CollapseDirectory",
    "Event",
    "ExpandDirectory",
    "MoveSelection",
    "NodeSelected",
    "Quit",
    "ScrollPreview",
    "ToggleDirectory",
    "ToggleView",
    "dispatch",
    "events_for_key",
    "run_browser",
]

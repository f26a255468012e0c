"""UI theme definitions and selection helpers.

Themes are ANSI palettes shared by the tree pane, the status line, and the
Markdown preview serializer. Structural styling (bold, underline, italic, dim)
is decided by the styler; themes only pick colors.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    divider: str
    tree_marker: str
    tree_root: str
    tree_dir: str
    tree_file: str
    status_error: str
    md_heading1: str
    md_heading2: str
    md_heading3: str
    md_code: str
    md_fence_label: str
    md_fence_divider: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2m",
    tree_marker="\033[38;5;44m",
    tree_root="\033[1;38;5;81m",
    tree_dir="\033[1;34m",
    tree_file="\033[38;5;252m",
    status_error="\033[1;38;5;203m",
    md_heading1="\033[33m",
    md_heading2="\033[34m",
    md_heading3="\033[31m",
    md_code="\033[38;2;126;126;126m",
    md_fence_label="",
    md_fence_divider="\033[32m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    divider="\033[2;38;5;31m",
    tree_marker="\033[38;5;39m",
    tree_root="\033[1;38;5;45m",
    tree_dir="\033[1;38;5;45m",
    tree_file="\033[38;5;252m",
    status_error="\033[1;38;5;210m",
    md_heading1="\033[38;5;45m",
    md_heading2="\033[38;5;117m",
    md_heading3="\033[38;5;153m",
    md_code="\033[38;5;109m",
    md_fence_label="\033[38;5;81m",
    md_fence_divider="\033[38;5;31m",
)

_THEMES: dict[str, UITheme] = {theme.name: theme for theme in (DEFAULT_THEME, OCEAN_THEME)}


def available_theme_names() -> tuple[str, ...]:
    """Return registered theme names in declaration order."""
    return tuple(_THEMES)


def resolve_theme(name: str | None) -> UITheme:
    """Return the named theme, falling back to ``DEFAULT_THEME``.

    Names are matched case-insensitively after trimming whitespace.
    """
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)

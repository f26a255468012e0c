"""Command-line front door for mdbrowse.

Loads the ignore list, walks the Markdown root, builds the tree, and hands it
to the interactive runtime. Startup failures print a diagnostic and exit
with status 1 before the UI starts.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import NoReturn

from .config import ConfigError, load_config, resolve_config_path
from .fs import list_markdown_files, read_text, sanitize_terminal_text
from .markdown import style_markdown
from .runtime import run_browser
from .tree_model import build_path_tree
from .ui_theme import available_theme_names, resolve_theme

DEFAULT_ROOT = Path("pages")


def _fail(message: str) -> NoReturn:
    print(message)
    raise SystemExit(1)


def render_markdown_file(path: Path, theme_name: str | None, no_color: bool) -> str:
    """Style one Markdown file the way the preview pane shows it."""
    source = sanitize_terminal_text(read_text(path))
    return style_markdown(source, theme=resolve_theme(theme_name), no_color=no_color)


def main() -> None:
    """Parse CLI arguments and launch the browser."""
    parser = argparse.ArgumentParser(
        description="Browse a directory of Markdown files in the terminal."
    )
    parser.add_argument("--root", type=Path, default=DEFAULT_ROOT, help="Directory to browse (default: pages).")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--nopager", action="store_true", help="Print the file tree and exit.")
    parser.add_argument("--render", metavar="PATH", type=Path, help="Style one Markdown file to stdout and exit.")
    args = parser.parse_args()

    if args.render is not None:
        try:
            rendered = render_markdown_file(args.render, args.theme, args.no_color)
        except OSError as exc:
            _fail(f"Error: {exc}")
        sys.stdout.write(rendered)
        return

    try:
        file_list = list_markdown_files(args.root)
    except OSError as exc:
        _fail(f"Error fetching file list: {exc}")

    try:
        config = load_config(resolve_config_path(args.config))
    except ConfigError as exc:
        _fail(str(exc))

    root = build_path_tree(file_list, config.ignore_files)
    run_browser(root, args.root, args.theme, args.no_color, args.nopager)


if __name__ == "__main__":
    main()

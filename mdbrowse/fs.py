"""Filesystem helpers: Markdown discovery and tolerant text reads."""

from __future__ import annotations

import os
import re
from pathlib import Path

MARKDOWN_SUFFIX = ".md"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")


def list_markdown_files(root: Path, suffix: str = MARKDOWN_SUFFIX) -> list[str]:
    """Return ``/``-separated paths, relative to ``root``, of files ending in ``suffix``.

    Each directory is visited in lexical name order with files and
    subdirectories interleaved, so the result is stable across runs. Any scan
    error (including a missing ``root``) propagates.
    """
    root = Path(root)
    if not root.is_dir():
        if root.exists():
            raise NotADirectoryError(f"not a directory: {root}")
        raise FileNotFoundError(f"no such directory: {root}")

    found: list[str] = []

    def walk(directory: Path, prefix: str) -> None:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
        for entry in entries:
            rel = f"{prefix}{entry.name}"
            if entry.is_dir(follow_symlinks=False):
                walk(Path(entry.path), f"{rel}/")
            elif entry.name.endswith(suffix):
                found.append(rel)

    walk(root, "")
    return found


def read_text(path: Path) -> str:
    """Read text using tolerant encoding fallback order.

    Attempts UTF-8, UTF-8 with BOM, then latin-1, which decodes any byte
    string and so ends the chain. ``OSError`` propagates.
    """
    path = Path(path)
    for encoding in ("utf-8", "utf-8-sig"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_text(encoding="latin-1")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", source)

"""Tree node datatypes shared by the builder, row flattening, and the session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

PathEntry = str


@dataclass(frozen=True)
class DirectoryKind:
    """Marker kind for directory (internal) nodes."""


@dataclass(frozen=True)
class FileKind:
    """Leaf kind carrying the relative path of the Markdown file."""

    path: PathEntry


NodeKind = Union[DirectoryKind, FileKind]


@dataclass
class TreeNode:
    """One path segment in the browsable tree.

    ``key`` is the cumulative path-so-far (``"/docs/intro.md"``) and is the
    identity used for deduplication and expansion state; ``label`` is only
    display text.
    """

    label: str
    key: str
    kind: NodeKind = field(default_factory=DirectoryKind)
    children: list[TreeNode] = field(default_factory=list)

    @property
    def reference(self) -> PathEntry | None:
        """Relative file path for leaves, ``None`` for directories."""
        if isinstance(self.kind, FileKind):
            return self.kind.path
        return None

    @property
    def selectable(self) -> bool:
        return self.reference is not None

    @property
    def is_dir(self) -> bool:
        """Whether the node groups other nodes rather than naming a file."""
        return not self.selectable


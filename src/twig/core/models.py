"""
Core data models for Twig.

Nodes live in a flat table owned by the TreeStore; parent and child links
are plain identities looked up in that table.

Modified: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence


@dataclass
class Node:
    """
    One entry in the outline.

    A node carrying content is a leaf; a node without content is a folder.
    Folders may have zero children. Leaves never have children.
    """

    id: int
    name: str
    content: Optional[str] = None
    children: List[int] = field(default_factory=list)
    parent: Optional[int] = None

    @property
    def is_leaf(self) -> bool:
        """True if the node carries a content payload."""
        return self.content is not None

    @property
    def is_folder(self) -> bool:
        return self.content is None

    @property
    def is_root(self) -> bool:
        """True for top-level nodes."""
        return self.parent is None


@dataclass(frozen=True)
class VisibleEntry:
    """
    One display line produced by the store's pre-order traversal.

    This is the contract consumed by the renderer.
    """

    depth: int
    node_id: int
    name: str
    is_selected: bool = False
    is_leaf: bool = False


def format_path(path: Sequence[int]) -> str:
    """Format a zero-based index path as a 1-based dotted label (e.g. "1.2")."""
    return ".".join(str(index + 1) for index in path)

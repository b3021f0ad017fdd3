"""
Core outline logic for Twig.

The tree store and command dispatch are interface-agnostic: nothing here
touches the terminal.

Modified: 2026-10-19
"""

from twig.core.exceptions import (
    TwigError,
    NodeNotFoundError,
    ConfigurationError,
    TerminalError,
)
from twig.core.models import Node, VisibleEntry, format_path
from twig.core.tree_store import TreeStore
from twig.core.dispatch import (
    ChordState,
    Command,
    CommandDispatcher,
    DispatchResult,
    EditorMode,
)

__all__ = [
    "TwigError",
    "NodeNotFoundError",
    "ConfigurationError",
    "TerminalError",
    "Node",
    "VisibleEntry",
    "format_path",
    "TreeStore",
    "ChordState",
    "Command",
    "CommandDispatcher",
    "DispatchResult",
    "EditorMode",
]

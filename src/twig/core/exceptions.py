"""
Custom exceptions for Twig.

Modified: 2026-10-19
"""


class TwigError(Exception):
    """Base exception for all Twig errors."""

    pass


class NodeNotFoundError(TwigError):
    """Raised when a node identity does not resolve to a node in the store."""

    def __init__(self, node_id: int):
        super().__init__(f"Node {node_id} does not exist")
        self.node_id = node_id


class ConfigurationError(TwigError):
    """Raised when configuration or a key map is invalid."""

    pass


class TerminalError(TwigError):
    """Raised when the terminal UI fails to start or crashes."""

    pass

"""Custom Textual messages for Twig.

Defines custom messages for communication between TUI components.

Modified: 2026-10-19
"""

from typing import Optional

from textual.message import Message

from ..core.dispatch import Command


class TreeChanged(Message):
    """Message sent after a command has been applied to the tree store."""

    def __init__(self, command: Optional[Command] = None, changed: bool = True):
        """Initialize tree changed message.

        Args:
            command: Command that was applied, None for edits made outside dispatch
            changed: False when the command was a no-op
        """
        super().__init__()
        self.command = command
        self.changed = changed


class StatusMessage(Message):
    """Message sent to show a transient status line."""

    def __init__(self, message: str, duration: int = 3):
        super().__init__()
        self.message = message
        self.duration = duration


class NodeClicked(Message):
    """Message sent when an outline line is clicked."""

    def __init__(self, node_id: int):
        super().__init__()
        self.node_id = node_id

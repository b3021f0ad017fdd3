"""Status bar widget for Twig.

Shows the editor mode, keyboard hints, and the selected node's position.

Modified: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static
from textual.widget import Widget
from textual.reactive import reactive


class StatusBar(Widget):
    """Status bar showing mode, hints and position."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $panel;
        color: $text;
        dock: bottom;
    }

    StatusBar > Horizontal {
        width: 100%;
        height: 1;
    }

    StatusBar .status-left {
        width: 1fr;
        padding: 0 1;
    }

    StatusBar .status-center {
        width: 2fr;
        text-align: center;
        padding: 0 1;
        color: $text-muted;
    }

    StatusBar .status-right {
        width: 1fr;
        text-align: right;
        padding: 0 1;
    }

    StatusBar .chord-pending {
        color: $warning;
        text-style: bold;
    }
    """

    # Reactive properties
    mode = reactive("")
    position = reactive("")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.left_widget: Optional[Static] = None
        self.center_widget: Optional[Static] = None
        self.right_widget: Optional[Static] = None
        self.hints = ""

    def compose(self) -> ComposeResult:
        """Create status bar layout."""
        with Horizontal():
            self.left_widget = Static("", classes="status-left", markup=False)
            self.center_widget = Static("", classes="status-center", markup=False)
            self.right_widget = Static("", classes="status-right", markup=False)

            yield self.left_widget
            yield self.center_widget
            yield self.right_widget

    def on_mount(self) -> None:
        """Initialize status bar with default values."""
        self.update_hints()

    def update_mode(self, mode: str, pending_key: Optional[str] = None) -> None:
        """Update the mode label (left side).

        Args:
            mode: Mode label, e.g. "Tree Mode"
            pending_key: First key of a chord in progress, shown after the mode
        """
        self.mode = mode
        display_text = mode
        if pending_key:
            display_text = f"{mode} {pending_key}-"

        if self.left_widget:
            self.left_widget.update(display_text)
            self.left_widget.set_class(bool(pending_key), "chord-pending")

    def update_position(self, path_label: str, node_count: int) -> None:
        """Update the selected node's path and the node count (right side).

        Args:
            path_label: Dotted 1-based path, empty when nothing is selected
            node_count: Number of nodes in the outline
        """
        noun = "node" if node_count == 1 else "nodes"
        self.position = f"{path_label} | {node_count} {noun}" if path_label else f"{node_count} {noun}"

        if self.right_widget:
            self.right_widget.update(self.position)

    def update_hints(self, custom_hints: Optional[str] = None) -> None:
        """Update keyboard hints.

        Args:
            custom_hints: Custom hint text to display
        """
        if custom_hints is not None:
            self.hints = custom_hints

        if self.center_widget:
            self.center_widget.update(self.hints)

    def show_message(self, message: str, duration: int = 3) -> None:
        """Show a temporary message in the center.

        Args:
            message: Message to display
            duration: Duration in seconds
        """
        if self.center_widget:
            self.center_widget.update(message)

            # Reset after duration
            self.set_timer(duration, self.update_hints)

"""Outline view for Twig.

Renders the tree store as one indented line per node and highlights the
selection.

Modified: 2026-10-19
"""

from typing import List, Optional

from textual.app import ComposeResult
from textual.containers import ScrollableContainer
from textual.widgets import Static

from ...config.settings import EditorSettings
from ...core.models import VisibleEntry
from ...core.tree_store import TreeStore
from ..messages import NodeClicked

EMPTY_TEXT = "Empty outline"


def format_entry(entry: VisibleEntry, editor: EditorSettings) -> str:
    """Format one display line: indentation, marker, name."""
    indent = " " * (entry.depth * editor.indent_width)
    marker = editor.leaf_marker if entry.is_leaf else editor.folder_marker
    return f"{indent}{marker} {entry.name}"


class OutlineLine(Static):
    """One rendered node."""

    def __init__(self, entry: VisibleEntry, text: str, **kwargs):
        super().__init__(text, markup=False, **kwargs)
        self.node_id = entry.node_id

    def on_click(self) -> None:
        self.post_message(NodeClicked(self.node_id))


class OutlineView(ScrollableContainer):
    """Scrollable column showing the whole outline in pre-order."""

    DEFAULT_CSS = """
    OutlineView {
        width: 100%;
        height: 100%;
        padding: 0 1;
    }

    OutlineView > .outline-item {
        width: 100%;
        height: 1;
    }

    OutlineView > .outline-item.leaf {
        color: $text-muted;
    }

    OutlineView > .outline-item.selected {
        background: $primary;
        color: $text;
        text-style: bold;
    }

    OutlineView > .empty {
        width: 100%;
        height: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """

    def __init__(self, store: TreeStore, editor: Optional[EditorSettings] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.store = store
        self.editor = editor or EditorSettings()
        self.entries: List[VisibleEntry] = []
        self.can_focus = True

    def compose(self) -> ComposeResult:
        """Initial composition."""
        yield Static(EMPTY_TEXT, classes="empty")

    async def refresh_display(self) -> None:
        """Rebuild the lines from the store."""
        await self.remove_children()

        self.entries = list(self.store.visible_entries())
        if not self.entries:
            await self.mount(Static(EMPTY_TEXT, classes="empty"))
            return

        items = []
        selected_item = None
        for entry in self.entries:
            classes = ["outline-item"]
            if entry.is_leaf:
                classes.append("leaf")
            if entry.is_selected:
                classes.append("selected")

            item = OutlineLine(entry, format_entry(entry, self.editor), classes=" ".join(classes))
            items.append(item)
            if entry.is_selected:
                selected_item = item

        await self.mount_all(items)

        # Keep the selected line on screen
        if selected_item is not None:
            self.scroll_to_widget(selected_item, animate=False)

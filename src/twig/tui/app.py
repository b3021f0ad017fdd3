"""Main Twig TUI application.

Coordinates the tree store, command dispatch and UI components.

Modified: 2026-10-19
"""

import asyncio
from pathlib import Path
from typing import Optional
import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import ModalScreen
from textual.widgets import Header
from textual import events

from ..config.settings import Settings
from ..core.dispatch import Command, CommandDispatcher, build_keymap
from ..core.exceptions import TerminalError
from ..core.models import format_path
from ..core.tree_store import TreeStore

from .keybindings import KeybindingRegistry
from .messages import NodeClicked, StatusMessage, TreeChanged
from .ui.modals import HelpModal, RenameModal
from .ui.outline_view import OutlineView
from .ui.status_bar import StatusBar


logger = logging.getLogger(__name__)


class TwigApp(App):
    """Main application class for Twig."""

    TITLE = "Twig"
    SUB_TITLE = "Terminal Outliner"

    # Everything else goes through the dispatcher in on_key()
    BINDINGS = [
        Binding("ctrl+q", "force_quit", "Force Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        settings: Optional[Settings] = None,
        store: Optional[TreeStore] = None,
    ):
        """Initialize the application.

        Args:
            settings: Loaded settings (defaults when None)
            store: Tree store to edit (a new empty store when None)

        Raises:
            ConfigurationError: If the configured key bindings are invalid
        """
        super().__init__()

        self.settings = settings or Settings()
        if store is None:
            store = TreeStore(placeholder_name=self.settings.editor.placeholder_name)
        self.store = store

        keymap = build_keymap(self.settings.keys.bindings)
        self.dispatcher = CommandDispatcher(self.store, keymap)
        self.registry = KeybindingRegistry(keymap)

        # UI components (assigned in compose)
        self.outline_view: Optional[OutlineView] = None
        self.status_bar: Optional[StatusBar] = None

    def compose(self) -> ComposeResult:
        """Create the application layout."""
        yield Header()

        self.outline_view = OutlineView(self.store, self.settings.editor, id="outline-view")
        yield self.outline_view

        self.status_bar = StatusBar(id="status-bar")
        yield self.status_bar

    async def on_mount(self) -> None:
        """Render the initial tree."""
        try:
            if self.status_bar:
                self.status_bar.update_hints(self.registry.format_hints())
            await self.refresh_tree()
            if self.outline_view:
                self.outline_view.focus()
            logger.info("Twig started")

        except Exception as e:
            logger.error(f"Error during initialization: {e}", exc_info=True)
            self.notify(f"Initialization error: {e}", severity="error")
            self.exit(return_code=1)

    async def refresh_tree(self) -> None:
        """Redraw the outline and the status bar from the store."""
        if self.outline_view:
            await self.outline_view.refresh_display()
        self.update_status()

    def update_status(self) -> None:
        if not self.status_bar:
            return
        self.status_bar.update_mode(self.dispatcher.mode.label, self.dispatcher.pending_key)

        selected_id = self.store.selected_id
        path_label = format_path(self.store.path_of(selected_id)) if selected_id is not None else ""
        self.status_bar.update_position(path_label, len(self.store))

    # Action handlers

    def action_force_quit(self) -> None:
        """Force quit the application."""
        self.exit()

    async def action_help(self) -> None:
        """Show the keybinding help."""
        await self.push_screen(HelpModal(self.registry.format_help_text()))

    async def action_rename(self) -> None:
        """Ask for a new name for the selected node."""
        node = self.store.selected_node
        if node is None:
            self.post_message(StatusMessage("Nothing selected"))
            return

        def apply(name: Optional[str]) -> None:
            if name and node.id in self.store:
                self.store.rename_node(node.id, name)
                self.post_message(TreeChanged())

        await self.push_screen(RenameModal(node.name), apply)

    # Message handlers

    async def on_tree_changed(self, message: TreeChanged) -> None:
        """Redraw after a command."""
        try:
            if message.changed:
                await self.refresh_tree()
            else:
                self.update_status()
        except Exception as e:
            logger.error(f"Error refreshing outline: {e}", exc_info=True)
            self.notify(f"Error: {e}", severity="error")

    async def on_node_clicked(self, message: NodeClicked) -> None:
        """Select the clicked node."""
        if message.node_id in self.store:
            self.store.select(message.node_id)
            await self.refresh_tree()

    async def on_status_message(self, message: StatusMessage) -> None:
        """Handle status messages."""
        if self.status_bar:
            self.status_bar.show_message(message.message, duration=message.duration)

    async def on_key(self, event: events.Key) -> None:
        """Feed keys to the command dispatcher."""
        if isinstance(self.screen, ModalScreen):
            return

        key = event.character if event.is_printable else event.key
        result = self.dispatcher.dispatch(key)

        if result.command is Command.QUIT:
            event.stop()
            logger.info("Quit requested")
            self.exit()
        elif result.command is Command.HELP:
            event.stop()
            await self.action_help()
        elif result.command is Command.RENAME:
            event.stop()
            await self.action_rename()
        elif result.handled:
            event.stop()
            self.post_message(TreeChanged(result.command, result.changed))
        else:
            if self.dispatcher.pending_key is not None:
                # First key of a chord
                event.stop()
            self.update_status()


async def run_app(config_path: Optional[Path] = None, settings: Optional[Settings] = None) -> None:
    """Run the Twig TUI application.

    Args:
        config_path: Optional configuration file path
        settings: Already-loaded settings (takes precedence over config_path)

    Raises:
        TerminalError: If the terminal UI fails
    """
    settings = settings or Settings.load(config_path)
    app = TwigApp(settings=settings)
    try:
        await app.run_async()
    except Exception as e:
        # Textual restores the terminal before the exception reaches us
        raise TerminalError(f"Terminal UI failed: {e}") from e

    if app.return_code:
        raise TerminalError(f"Terminal UI exited with code {app.return_code}")


if __name__ == "__main__":
    asyncio.run(run_app())

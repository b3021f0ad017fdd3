"""Modal overlay listing the active keybindings.

Modified: 2026-10-19
"""

from textual import events
from textual.app import ComposeResult
from textual.containers import Container
from textual.widgets import Static
from textual.screen import ModalScreen


class HelpModal(ModalScreen[None]):
    """Shows the help text; any key closes it."""

    DEFAULT_CSS = """
    HelpModal {
        align: center middle;
    }

    HelpModal > Container {
        width: 64;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }
    """

    def __init__(self, help_text: str, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.help_text = help_text

    def compose(self) -> ComposeResult:
        with Container():
            yield Static(self.help_text, id="help-text", markup=False)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss(None)

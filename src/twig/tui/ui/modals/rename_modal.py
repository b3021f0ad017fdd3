"""Modal dialog for renaming an outline node.

Modified: 2026-10-19
"""

from typing import Optional

from textual.app import ComposeResult
from textual.containers import Container, Vertical, Horizontal
from textual.widgets import Static, Input, Button
from textual.screen import ModalScreen
from textual.validation import Length


class RenameModal(ModalScreen[Optional[str]]):
    """Modal dialog asking for a node's new name.

    Dismisses with the stripped name, or None when cancelled.
    """

    DEFAULT_CSS = """
    RenameModal {
        align: center middle;
    }

    RenameModal > Container {
        width: 60;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    RenameModal Static#title {
        text-align: center;
        text-style: bold;
        color: $primary;
    }

    RenameModal Input {
        margin: 1 0;
    }

    RenameModal Container#buttons {
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    RenameModal Button {
        margin: 0 1;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, current_name: str = "", *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.current_name = current_name

    def compose(self) -> ComposeResult:
        """Compose the modal layout."""
        with Container():
            yield Static("Rename Node", id="title")

            with Vertical():
                yield Input(
                    value=self.current_name,
                    placeholder="Enter node name",
                    id="name_input",
                    validators=[Length(minimum=1, maximum=200)]
                )

                with Horizontal(id="buttons"):
                    yield Button("Rename", variant="primary", id="rename")
                    yield Button("Cancel", variant="default", id="cancel")

    def on_mount(self) -> None:
        """Focus the name input when mounted."""
        self.query_one("#name_input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "rename":
            self.submit()
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the name field."""
        self.submit()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def submit(self) -> None:
        """Validate and return the new name."""
        name_input = self.query_one("#name_input", Input)

        name = name_input.value.strip()
        if not name:
            name_input.focus()
            return

        self.dismiss(name)

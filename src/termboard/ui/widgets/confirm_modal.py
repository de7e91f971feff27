"""Yes/no dialog used before destructive or lossy actions."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class ConfirmModal(ModalScreen[bool]):
    """
    Ask the user to confirm an action.

    Dismisses with True for confirm (``y`` or the confirm button) and False
    for anything else, including escape.
    """

    DEFAULT_CSS = """
    ConfirmModal {
        align: center middle;
    }

    ConfirmModal > Vertical {
        width: 56;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: thick $error 60%;
    }

    ConfirmModal .confirm-title {
        text-style: bold;
        color: $error;
    }

    ConfirmModal .confirm-message {
        padding: 1 0;
    }

    ConfirmModal .confirm-buttons {
        height: auto;
        align-horizontal: right;
    }

    ConfirmModal .confirm-buttons Button {
        margin-left: 2;
    }
    """

    BINDINGS = [
        Binding("y", "confirm", "Yes", show=False),
        Binding("n", "cancel", "No", show=False),
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(
        self,
        message: str,
        title: str = "Are you sure?",
        confirm_label: str = "Quit",
        cancel_label: str = "Stay",
    ) -> None:
        super().__init__()
        self.message = message
        self.heading = title
        self.confirm_label = confirm_label
        self.cancel_label = cancel_label

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(self.heading, classes="confirm-title")
            yield Static(self.message, classes="confirm-message")
            with Horizontal(classes="confirm-buttons"):
                yield Button(f"{self.cancel_label} [n]", id="cancel")
                yield Button(f"{self.confirm_label} [y]", id="confirm", variant="error")

    def on_mount(self) -> None:
        # Focus the safe choice
        self.query_one("#cancel", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "confirm")

    def action_confirm(self) -> None:
        self.dismiss(True)

    def action_cancel(self) -> None:
        self.dismiss(False)

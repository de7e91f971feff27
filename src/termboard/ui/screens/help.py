"""Key reference overlay."""

from textual import events
from textual.app import ComposeResult
from textual.containers import Grid, Vertical
from textual.screen import ModalScreen
from textual.widgets import Static

# (section, [(keys, description), ...]) in display order
HELP_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Move around",
        (
            ("h  ←", "Column to the left"),
            ("l  →", "Column to the right"),
            ("k  ↑", "Task above"),
            ("j  ↓", "Task below"),
        ),
    ),
    (
        "Edit the board",
        (
            ("n  a", "New task in the selected column"),
            ("L  shift+→  enter", "Push task to the next column"),
            ("H  shift+←", "Pull task back to the previous column"),
        ),
    ),
    (
        "Session",
        (
            ("s", "Write the board file"),
            ("q", "Save, then quit"),
            ("?", "This reference"),
        ),
    ),
)


class HelpScreen(ModalScreen):
    """Overlay listing every key binding. Any key closes it."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > Vertical {
        width: 64;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $panel;
        border: round $accent;
    }

    HelpScreen .help-heading {
        color: $accent;
        text-style: bold underline;
        margin-top: 1;
    }

    HelpScreen Grid {
        grid-size: 2;
        grid-columns: 22 1fr;
        grid-rows: 1;
        height: auto;
    }

    HelpScreen .help-keys {
        text-style: bold;
    }

    HelpScreen .help-hint {
        color: $text-muted;
        text-align: right;
        margin-top: 1;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static("[b]termboard keys[/b]")
            for heading, rows in HELP_SECTIONS:
                yield Static(heading, classes="help-heading")
                with Grid():
                    for keys, description in rows:
                        yield Static(keys, classes="help-keys")
                        yield Static(description)
            yield Static("any key to close", classes="help-hint")

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dismiss()

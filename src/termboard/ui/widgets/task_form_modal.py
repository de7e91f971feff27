"""Modal form collecting the fields of a new task."""

from dataclasses import dataclass, field

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Input, Label, Static


@dataclass
class TaskDraft:
    """Raw text entered in the task form.

    The due date stays unparsed; the app decides what to do with bad input.
    """

    title: str
    description: str = ""
    tags: list[str] = field(default_factory=list)
    due_date: str = ""


def parse_tags(text: str) -> list[str]:
    """Split a comma-separated tag field."""
    return [tag.strip() for tag in text.split(",") if tag.strip()]


class TaskFormModal(ModalScreen[TaskDraft | None]):
    """Form for a new task.

    Returns a TaskDraft on submit, or None if cancelled. Submitting with an
    empty title keeps the form open.
    """

    DEFAULT_CSS = """
    TaskFormModal {
        align: center middle;
    }

    TaskFormModal > Vertical {
        width: 70;
        height: auto;
        padding: 1 2;
        background: $surface;
        border: solid $primary;
    }

    TaskFormModal .form-title {
        text-align: center;
        text-style: bold;
        padding-bottom: 1;
    }

    TaskFormModal Label {
        color: $text-muted;
    }

    TaskFormModal #form-error {
        color: $error;
        height: auto;
    }

    TaskFormModal .form-footer {
        text-align: center;
        color: $text-muted;
        padding-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    FIELD_IDS = ("title", "description", "tags", "due")

    def __init__(self, column_name: str) -> None:
        super().__init__()
        self.column_name = column_name

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Static(f"New task in {self.column_name}", classes="form-title")
            yield Label("Title")
            yield Input(placeholder="What needs doing?", id="title")
            yield Label("Description")
            yield Input(placeholder="Optional", id="description")
            yield Label("Tags")
            yield Input(placeholder="comma, separated", id="tags")
            yield Label("Due date")
            yield Input(placeholder="YYYY-MM-DD (optional)", id="due")
            yield Static("", id="form-error")
            yield Static("[Enter] Next / Save  [Esc] Cancel", classes="form-footer")

    def on_mount(self) -> None:
        self.query_one("#title", Input).focus()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Enter advances to the next field; on the last field it submits."""
        event.stop()
        field_id = event.input.id or ""
        if field_id in self.FIELD_IDS[:-1]:
            next_id = self.FIELD_IDS[self.FIELD_IDS.index(field_id) + 1]
            self.query_one(f"#{next_id}", Input).focus()
            return
        self.action_submit()

    def action_submit(self) -> None:
        draft = self.build_draft(
            title=self.query_one("#title", Input).value,
            description=self.query_one("#description", Input).value,
            tags=self.query_one("#tags", Input).value,
            due_date=self.query_one("#due", Input).value,
        )
        if draft is None:
            self.query_one("#form-error", Static).update("Title is required")
            self.query_one("#title", Input).focus()
            return
        self.dismiss(draft)

    def action_cancel(self) -> None:
        self.dismiss(None)

    @staticmethod
    def build_draft(title: str, description: str, tags: str, due_date: str) -> TaskDraft | None:
        """Build a draft from raw field values, or None if the title is blank."""
        if not title.strip():
            return None
        return TaskDraft(
            title=title.strip(),
            description=description.strip(),
            tags=parse_tags(tags),
            due_date=due_date.strip(),
        )

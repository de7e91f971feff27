"""Card showing one task inside a column."""

from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from ...utils.datetime import format_due_date

TITLE_WIDTH = 40
PREVIEW_WIDTH = 50
MAX_TAGS = 3


def shorten(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` characters, marking the cut with an ellipsis."""
    return text if len(text) <= width else text[: width - 1] + "…"


def tag_line(tags: list[str]) -> str:
    shown = " ".join(f"[b]#[/b]{tag}" for tag in tags[:MAX_TAGS])
    hidden = len(tags) - MAX_TAGS
    return f"{shown} [dim]+{hidden}[/]" if hidden > 0 else shown


def first_line(text: str | None) -> str:
    return next((line.strip() for line in (text or "").splitlines() if line.strip()), "")


class TaskCard(Widget):
    """A task's title, due date, tags and the first description line."""

    def __init__(self, task_data: Task, selected: bool = False, **kwargs) -> None:
        super().__init__(**kwargs)
        self.task_data = task_data
        self.set_class(selected, "selected")

    def compose(self) -> ComposeResult:
        task = self.task_data
        yield Static(
            f"{shorten(task.display_title, TITLE_WIDTH)} [dim]{task.short_id}[/]",
            classes="task-title",
        )
        if task.due_date is not None:
            yield Static(f"⏰ {format_due_date(task.due_date)}", classes="task-due")
        if task.tags:
            yield Static(tag_line(task.tags), classes="task-tags")
        preview = first_line(task.description)
        if preview and preview != task.title:
            yield Static(shorten(preview, PREVIEW_WIDTH), classes="task-preview")

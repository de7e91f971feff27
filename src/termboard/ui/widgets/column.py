"""Column widget: a header and a scrollable stack of task cards."""

from textual.actions import SkipAction
from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.css.query import NoMatches
from textual.widget import Widget
from textual.widgets import Static

from ...models import Task
from .task_card import TaskCard


class TaskListScroll(VerticalScroll):
    """Card container that leaves j/k/arrows to the app.

    The board cursor, not the scroll position, decides what is visible.
    """

    def action_scroll_up(self) -> None:
        raise SkipAction()

    def action_scroll_down(self) -> None:
        raise SkipAction()

    def action_scroll_home(self) -> None:
        raise SkipAction()

    def action_scroll_end(self) -> None:
        raise SkipAction()

    def action_page_up(self) -> None:
        raise SkipAction()

    def action_page_down(self) -> None:
        raise SkipAction()


class EmptyColumnMessage(Static):
    """Placeholder shown in a column with no cards."""


class KanbanColumn(Widget):
    """One board column.

    Widget ids are positional (``column-0``) since column names are free
    text and may not be valid CSS identifiers.
    """

    def __init__(self, title: str, status: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.title = title
        self.status = status
        self._tasks: tuple[Task, ...] = ()
        self._selected_index: int | None = None

    @property
    def tasks(self) -> tuple[Task, ...]:
        return self._tasks

    @property
    def task_count(self) -> int:
        return len(self._tasks)

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    def header_text(self) -> str:
        return f"{self.title} [dim]{len(self._tasks)}[/]"

    def compose(self) -> ComposeResult:
        yield Static(self.header_text(), classes="column-header")
        yield TaskListScroll(classes="column-content")

    def set_tasks(
        self,
        tasks: tuple[Task, ...],
        selected_index: int | None = None,
        is_current: bool = False,
    ) -> None:
        """Show ``tasks``, highlighting ``selected_index`` when this column has the cursor."""
        self._tasks = tasks
        self._selected_index = selected_index
        self.set_class(is_current, "current")
        self.call_after_refresh(self._rebuild_cards)

    async def _rebuild_cards(self) -> None:
        try:
            content = self.query_one(".column-content", TaskListScroll)
            header = self.query_one(".column-header", Static)
        except NoMatches:
            # Column was removed before the refresh ran
            return

        header.update(self.header_text())
        await content.remove_children()

        if not self._tasks:
            await content.mount(EmptyColumnMessage("empty"))
            return

        cards = [
            TaskCard(task, selected=index == self._selected_index)
            for index, task in enumerate(self._tasks)
        ]
        await content.mount_all(cards)
        if self._selected_index is not None and self._selected_index < len(cards):
            cards[self._selected_index].scroll_visible()

"""Board screen: one KanbanColumn per board column."""

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Footer, Header

from ...models import Board
from ..widgets.column import KanbanColumn


class BoardScreen(Screen):
    """Renders the app's Board.

    The screen holds no state of its own; the Board owns the cursor and
    ``refresh_board`` copies it into the column widgets.
    """

    @property
    def board(self) -> Board:
        return self.app.board  # type: ignore[attr-defined]

    def compose(self) -> ComposeResult:
        board_config = self.app.config_service.get_board_config()  # type: ignore[attr-defined]
        yield Header()
        with Horizontal(id="columns"):
            for index, name in enumerate(self.board.column_names):
                yield KanbanColumn(
                    title=board_config.get_title(name),
                    status=name,
                    id=f"column-{index}",
                )
        yield Footer()

    def on_mount(self) -> None:
        self.refresh_board()

    def refresh_board(self) -> None:
        board = self.board
        for index, name in enumerate(board.column_names):
            try:
                column = self.query_one(f"#column-{index}", KanbanColumn)
            except NoMatches:
                self.log.warning(f"No widget for column {name!r}")
                continue
            is_current = index == board.selected_column_index
            column.set_tasks(
                board.tasks_in_column(name),
                selected_index=board.selected_task_index if is_current else None,
                is_current=is_current,
            )

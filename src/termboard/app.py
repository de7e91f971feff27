"""termboard TUI Application."""

import logging
from collections.abc import Callable

from textual.app import App
from textual.binding import Binding

from .config import Settings
from .errors import InvalidInputError
from .models import Board, Direction
from .repositories import JsonBoardRepository
from .services import BoardService, ConfigService
from .ui.screens import BoardScreen, HelpScreen
from .ui.widgets import ConfirmModal, TaskDraft, TaskFormModal
from .utils.datetime import parse_due_date

logger = logging.getLogger(__name__)

INPUT_ADD_TASK = "add_task"


class TermboardApp(App):
    """termboard - Terminal Kanban TUI."""

    TITLE = "termboard"

    CSS_PATH = "ui/styles.tcss"

    BINDINGS = [
        # Core bindings
        Binding("q", "quit", "Quit", show=True),
        Binding("?", "help", "Help", show=True),
        Binding("s", "save", "Save", show=True),
        # Navigation - vim style
        Binding("h", "nav_left", "← Column", show=False),
        Binding("j", "nav_down", "↓ Task", show=False),
        Binding("k", "nav_up", "↑ Task", show=False),
        Binding("l", "nav_right", "→ Column", show=False),
        # Navigation - arrow keys
        Binding("left", "nav_left", "← Column", show=False),
        Binding("down", "nav_down", "↓ Task", show=False),
        Binding("up", "nav_up", "↑ Task", show=False),
        Binding("right", "nav_right", "→ Column", show=False),
        # Task actions
        Binding("n", "new_task", "New", show=True),
        Binding("a", "new_task", "New", show=False),
        Binding("L", "move_task_forward", "Move →", show=True),
        Binding("shift+right", "move_task_forward", "Move →", show=False),
        Binding("enter", "move_task_forward", "Move →", show=False),
        Binding("H", "move_task_backward", "Move ←", show=True),
        Binding("shift+left", "move_task_backward", "Move ←", show=False),
    ]

    SCREENS = {
        "board": BoardScreen,
    }

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.settings = settings or Settings()
        # Purpose of the open input form, None while the board has the keys
        self.awaiting_input: str | None = None
        # Set once the user agrees to replace a board file that failed to load
        self.overwrite_confirmed = False
        self._init_services()

    def _init_services(self) -> None:
        """Initialize config, repository and services, then load the board."""
        self.config_service = ConfigService(self.settings.project_root, self.settings.board_file)
        self.repository = JsonBoardRepository(self.config_service.board_file)
        self.board_service = BoardService(self.repository, self.config_service)
        self.board: Board = self.board_service.load_board()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.push_screen("board")
        if self.config_service.has_config_error:
            self.notify(self.config_service.config_error, title="Config", severity="warning")
        if self.board_service.load_error:
            self.notify(
                f"Started with an empty board: {self.board_service.load_error}",
                title="Load failed",
                severity="warning",
                timeout=10,
            )

    def _refresh_board(self) -> None:
        screen = self.screen
        if isinstance(screen, BoardScreen):
            screen.refresh_board()

    def action_help(self) -> None:
        """Show help screen."""
        self.push_screen(HelpScreen())

    # Navigation actions
    def action_nav_left(self) -> None:
        """Select previous column."""
        if self.awaiting_input:
            return
        self.board.select_previous_column()
        self._refresh_board()

    def action_nav_right(self) -> None:
        """Select next column."""
        if self.awaiting_input:
            return
        self.board.select_next_column()
        self._refresh_board()

    def action_nav_up(self) -> None:
        """Select previous task."""
        if self.awaiting_input:
            return
        self.board.select_previous_task()
        self._refresh_board()

    def action_nav_down(self) -> None:
        """Select next task."""
        if self.awaiting_input:
            return
        self.board.select_next_task()
        self._refresh_board()

    # Task actions
    def action_new_task(self) -> None:
        """Open the task form for the selected column."""
        if self.awaiting_input:
            return
        self.awaiting_input = INPUT_ADD_TASK
        self.push_screen(
            TaskFormModal(self.board.selected_column.name),
            callback=self._handle_new_task,
        )

    def _handle_new_task(self, draft: TaskDraft | None) -> None:
        """Apply the submitted task form."""
        self.awaiting_input = None
        if draft is None:
            return

        due_date = None
        if draft.due_date:
            try:
                due_date = parse_due_date(draft.due_date)
            except InvalidInputError as e:
                logger.info("Ignoring due date: %s", e)
                self.notify(f"{e}; saved without a due date", severity="warning")

        task = self.board.add_task(
            draft.title,
            description=draft.description or None,
            tags=draft.tags,
            due_date=due_date,
        )
        self._refresh_board()
        self.notify(f"Added to {task.status}", timeout=2)

    def action_move_task_forward(self) -> None:
        """Move selected task to the next column."""
        self._move_task(Direction.FORWARD)

    def action_move_task_backward(self) -> None:
        """Move selected task to the previous column."""
        self._move_task(Direction.BACKWARD)

    def _move_task(self, direction: Direction) -> None:
        if self.awaiting_input:
            return
        moved = self.board.move_task(direction)
        if moved is None:
            return
        self._refresh_board()
        self.notify(f"Moved to {moved.status}", timeout=2)

    # Persistence actions
    def _may_overwrite(self) -> bool:
        """False while the board file failed to load and no overwrite was confirmed."""
        return self.board_service.load_error is None or self.overwrite_confirmed

    def _confirm_overwrite(self, then: Callable[[], None], on_decline: Callable[[], None]) -> None:
        """Ask before replacing a board file that could not be loaded."""

        def handle(confirmed: bool | None) -> None:
            if confirmed:
                self.overwrite_confirmed = True
                then()
            else:
                on_decline()

        self.push_screen(
            ConfirmModal(
                "The board file could not be loaded. Overwrite it?",
                title="Board not loaded",
                confirm_label="Overwrite",
                cancel_label="Keep file",
            ),
            callback=handle,
        )

    def action_save(self) -> None:
        """Save the board now."""
        if not self._may_overwrite():
            self._confirm_overwrite(then=self.action_save, on_decline=lambda: None)
            return
        if self.board_service.save_board(self.board):
            self.notify("Board saved", timeout=2)
        else:
            self._notify_save_failed()

    async def action_quit(self) -> None:
        """Save and exit. A failed save asks before quitting."""
        if isinstance(self.screen, ConfirmModal):
            return
        if not self._may_overwrite():
            # Declining keeps the unreadable file and quits without saving
            self._confirm_overwrite(then=self._save_and_exit, on_decline=self.exit)
            return
        self._save_and_exit()

    def _save_and_exit(self) -> None:
        if self.board_service.save_board(self.board):
            self.exit()
            return

        self._notify_save_failed()
        self.push_screen(
            ConfirmModal("Saving failed. Quit without saving?", title="Board not saved"),
            callback=self._handle_quit_confirm,
        )

    def _handle_quit_confirm(self, confirmed: bool | None) -> None:
        if confirmed:
            self.exit()

    def _notify_save_failed(self) -> None:
        self.notify(
            f"Could not save board: {self.board_service.save_error}",
            title="Save failed",
            severity="error",
        )


def run(settings: Settings | None = None) -> None:
    """Run the termboard application."""
    app = TermboardApp(settings)
    app.run()

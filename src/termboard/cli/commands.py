"""Board subcommands: add, show, list, tags, stats, export, import."""

import logging
from collections.abc import Sequence
from pathlib import Path

from rich.console import Console
from rich.table import Table

from ..errors import InvalidInputError, PersistenceError
from ..models import Board
from ..services import BoardService
from ..utils.datetime import format_due_date, parse_due_date
from .output import error, header, info, success, warning

logger = logging.getLogger(__name__)


def _load(board_service: BoardService) -> Board:
    """Load the board, reporting a recovered load failure."""
    board = board_service.load_board()
    if board_service.load_error:
        warning(f"Could not load board: {board_service.load_error}")
    return board


def _save(board_service: BoardService, board: Board) -> int:
    if not board_service.save_board(board):
        error(f"Could not save board: {board_service.save_error}")
        return 1
    return 0


def run_add(
    board_service: BoardService,
    title: str,
    description: str | None = None,
    tags: Sequence[str] = (),
    due: str | None = None,
    status: str | None = None,
) -> int:
    """Add a task to the given column (default: first column) and save."""
    board = _load(board_service)
    if board_service.load_error:
        error("Refusing to modify a board that failed to load")
        return 1

    if status is not None:
        if status not in board.column_names:
            error(f"Unknown status '{status}'. Columns: {', '.join(board.column_names)}")
            return 1
        while board.selected_column.name != status:
            board.select_next_column()

    due_date = None
    if due:
        try:
            due_date = parse_due_date(due)
        except InvalidInputError as e:
            warning(f"{e}; saving without a due date")

    task = board.add_task(title, description=description, tags=tags, due_date=due_date)
    if _save(board_service, board):
        return 1
    success(f"Added [{task.short_id}] {task.title} to {task.status}")
    return 0


def run_show(board_service: BoardService, console: Console | None = None) -> int:
    """Print the board as a table with one column per status."""
    board = _load(board_service)
    console = console or Console()

    table = Table(show_lines=False, expand=True)
    columns = [board.tasks_in_column(name) for name in board.column_names]
    for name, tasks in zip(board.column_names, columns):
        table.add_column(f"{name} ({len(tasks)})", overflow="fold")

    depth = max((len(tasks) for tasks in columns), default=0)
    for row in range(depth):
        cells = []
        for tasks in columns:
            if row < len(tasks):
                task = tasks[row]
                due = format_due_date(task.due_date)
                cell = f"[dim]#{task.short_id}[/] {task.display_title}"
                if due:
                    cell += f" [dim](due {due})[/]"
                cells.append(cell)
            else:
                cells.append("")
        table.add_row(*cells)

    console.print(table)
    return 0


def run_list(board_service: BoardService) -> int:
    """List tasks grouped by column."""
    board = _load(board_service)
    for name in board.column_names:
        header(f"{name}:")
        for task in board.tasks_in_column(name):
            tags = ", ".join(task.tags)
            print(f"- [{task.short_id}] {task.display_title} ({tags})")
    return 0


def run_tags(board_service: BoardService) -> int:
    """List unique tags."""
    board = _load(board_service)
    tags = board.all_tags()
    if not tags:
        info("No tags")
        return 0
    print("Tags: " + ", ".join(tags))
    return 0


def run_stats(board_service: BoardService) -> int:
    """Show task counts per column."""
    board = _load(board_service)
    for name, count in board.stats().items():
        print(f"{name}: {count}")
    print(f"Total: {board.task_count}")
    return 0


def run_export(board_service: BoardService, path: Path) -> int:
    """Export the board to CSV."""
    board = _load(board_service)
    try:
        count = board_service.export_csv(board, path)
    except PersistenceError as e:
        error(str(e))
        return 1
    success(f"Exported {count} tasks to {path}")
    return 0


def run_import(board_service: BoardService, path: Path) -> int:
    """Replace the board with the contents of a CSV file and save."""
    try:
        board = board_service.import_csv(path)
    except PersistenceError as e:
        error(str(e))
        return 1
    if _save(board_service, board):
        return 1
    success(f"Imported {board.task_count} tasks from {path}")
    return 0

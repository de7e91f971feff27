"""JSON file repository for board storage."""

import json
import logging
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from ..errors import PersistenceError
from ..models import DEFAULT_COLUMNS, Board, Task

logger = logging.getLogger(__name__)

FORMAT_VERSION = 1


class JsonBoardRepository:
    """
    Repository for a board stored as a single JSON file.

    The file holds the column names and every task record in column order.
    A bare list of task records (the legacy format) is also accepted on load.
    """

    def __init__(self, path: Path) -> None:
        """
        Initialize repository.

        Args:
            path: Path to the board file (e.g., kanban_board.json)
        """
        self.path = path

    def load(self, column_names: Sequence[str] | None = None) -> Board:
        """
        Load the board from disk.

        Args:
            column_names: Configured columns. When None, the file's columns
                are used, falling back to the defaults.

        Raises:
            PersistenceError: If the file cannot be read or parsed.
        """
        if not self.path.exists():
            logger.debug("No board file at %s, starting empty", self.path)
            return Board.create(column_names or DEFAULT_COLUMNS)

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise PersistenceError(f"Invalid JSON in {self.path}: {e}") from e

        board = self.board_from_data(data, column_names)
        logger.info("Loaded %d tasks from %s", board.task_count, self.path)
        return board

    def save(self, board: Board) -> None:
        """
        Write the board to disk.

        Writes a temporary sibling file first and replaces the target, so an
        interrupted save leaves the previous file intact.

        Raises:
            PersistenceError: If the file cannot be written.
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self.board_to_data(board), f, indent=2)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceError(f"Cannot write {self.path}: {e}") from e
        logger.info("Saved %d tasks to %s", board.task_count, self.path)

    @staticmethod
    def board_to_data(board: Board) -> dict[str, Any]:
        """Convert a board to its JSON document."""
        return {
            "version": FORMAT_VERSION,
            "columns": board.column_names,
            "tasks": [task.to_record() for task in board.all_tasks()],
        }

    @staticmethod
    def board_from_data(data: Any, column_names: Sequence[str] | None = None) -> Board:
        """
        Build a board from a parsed JSON document.

        Raises:
            PersistenceError: If the document has the wrong shape.
        """
        stored_columns: list[str] | None = None
        if isinstance(data, list):
            records = data
        elif isinstance(data, dict):
            records = data.get("tasks", [])
            stored_columns = data.get("columns")
        else:
            raise PersistenceError(
                f"Board file must contain an object or a list, got {type(data).__name__}"
            )

        if not isinstance(records, list):
            raise PersistenceError("'tasks' must be a list")
        if stored_columns is not None and not (
            isinstance(stored_columns, list)
            and stored_columns
            and all(isinstance(name, str) and name for name in stored_columns)
        ):
            raise PersistenceError("'columns' must be a non-empty list of names")

        tasks = [Task.from_record(record) for record in records]
        columns = column_names or stored_columns or DEFAULT_COLUMNS
        try:
            return Board.from_tasks(tasks, columns)
        except ValueError as e:
            raise PersistenceError(f"Invalid column set: {e}") from e

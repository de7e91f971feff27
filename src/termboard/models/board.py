"""Board state models and the status-transition engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from ..errors import TaskNotFoundError
from .task import Task

logger = logging.getLogger(__name__)

DEFAULT_COLUMNS: tuple[str, ...] = ("Todo", "Doing", "Done")


class Direction(int, Enum):
    """Direction of a move between adjacent columns."""

    BACKWARD = -1
    FORWARD = 1


class Column(BaseModel):
    """A named, ordered collection of tasks."""

    name: str = Field(..., min_length=1)
    tasks: list[Task] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.tasks)

    @property
    def is_empty(self) -> bool:
        return not self.tasks

    def append(self, task: Task) -> None:
        """Add task to the end of the column."""
        self.tasks.append(task)

    def index_of(self, task_id: str) -> int:
        """Position of a task in the column, or -1 if not found."""
        for idx, task in enumerate(self.tasks):
            if task.id == task_id:
                return idx
        return -1

    def remove_by_id(self, task_id: str) -> Task:
        """
        Remove and return the task with the given id.

        Raises:
            TaskNotFoundError: If no task in this column has the id.
        """
        idx = self.index_of(task_id)
        if idx < 0:
            raise TaskNotFoundError(task_id)
        return self.tasks.pop(idx)

    def tasks_snapshot(self) -> tuple[Task, ...]:
        """Read-only ordered view of the column's tasks."""
        return tuple(self.tasks)


class Board(BaseModel):
    """Full board state: ordered columns plus the selection cursor.

    Column membership is the source of truth for a task's status. The
    ``status`` label on each task is written only by ``_place`` so the two
    never disagree.
    """

    columns: list[Column] = Field(..., min_length=1)
    selected_column_index: int = 0
    selected_task_index: int | None = None

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[Column]) -> list[Column]:
        """Validate column names are unique."""
        names = [col.name for col in v]
        if len(names) != len(set(names)):
            raise ValueError("Column names must be unique")
        return v

    @classmethod
    def create(cls, column_names: Sequence[str] = DEFAULT_COLUMNS) -> Board:
        """Create an empty board with the given columns."""
        return cls(columns=[Column(name=name) for name in column_names])

    @classmethod
    def from_tasks(
        cls,
        tasks: Iterable[Task],
        column_names: Sequence[str] = DEFAULT_COLUMNS,
    ) -> Board:
        """
        Create Board from tasks, grouping them by status.

        Tasks keep their relative order within a column. A task whose status
        is not one of the columns is placed in the first column. Duplicate
        ids are dropped.
        """
        board = cls.create(column_names)
        first = board.columns[0]
        seen: set[str] = set()

        for task in tasks:
            if task.id in seen:
                logger.warning("Dropping duplicate task id: %s", task.id)
                continue
            seen.add(task.id)

            column = board.get_column(task.status) if task.status else None
            if column is None:
                logger.warning(
                    "Task %s has unknown status %r, placing in %s",
                    task.id,
                    task.status,
                    first.name,
                )
                column = first
            board._place(task, column)

        board._reset_task_selection()
        return board

    # --- Read accessors ---

    @property
    def column_names(self) -> list[str]:
        """Column names in display order."""
        return [col.name for col in self.columns]

    @property
    def selected_column(self) -> Column:
        return self.columns[self.selected_column_index]

    @property
    def selected_task(self) -> Task | None:
        """The task under the cursor, if any."""
        if self.selected_task_index is None:
            return None
        tasks = self.selected_column.tasks
        if 0 <= self.selected_task_index < len(tasks):
            return tasks[self.selected_task_index]
        return None

    @property
    def task_count(self) -> int:
        return sum(len(col) for col in self.columns)

    def get_column(self, name: str) -> Column | None:
        """Get a column by name."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def get_task(self, task_id: str) -> Task | None:
        """Find a task anywhere on the board."""
        for col in self.columns:
            idx = col.index_of(task_id)
            if idx >= 0:
                return col.tasks[idx]
        return None

    def all_tasks(self) -> list[Task]:
        """All tasks in column order, then in-column order."""
        return [task for col in self.columns for task in col.tasks]

    def tasks_in_column(self, name: str) -> tuple[Task, ...]:
        """Tasks whose status is ``name``, in display order."""
        column = self.get_column(name)
        if column is None:
            return ()
        return column.tasks_snapshot()

    def all_tags(self) -> list[str]:
        """Unique tags across the board, in first-seen order."""
        tags: list[str] = []
        for task in self.all_tasks():
            for tag in task.tags:
                if tag not in tags:
                    tags.append(tag)
        return tags

    def stats(self) -> dict[str, int]:
        """Task count per column, in column order."""
        return {col.name: len(col) for col in self.columns}

    # --- Mutations ---

    def add_task(
        self,
        title: str,
        description: str | None = None,
        tags: Iterable[str] = (),
        due_date: datetime | None = None,
    ) -> Task:
        """
        Create a task in the selected column.

        The new task is appended and not selected. If the column was empty
        the cursor lands on index 0, which is the new task.
        """
        task = Task.create(title, description=description, tags=tags, due_date=due_date)
        column = self.selected_column
        self._place(task, column)
        if self.selected_task_index is None:
            self.selected_task_index = 0
        logger.info("Task added: %s (%s)", task.id, column.name)
        return task

    def move_task(self, direction: Direction) -> Task | None:
        """
        Move the selected task to the adjacent column.

        Moving past either end of the board is a no-op. The cursor follows
        the moved task to the end of its new column.

        Returns:
            The moved task, or None if nothing moved.
        """
        task = self.selected_task
        if task is None:
            return None

        source_idx = self.selected_column_index
        dest_idx = max(0, min(source_idx + int(direction), len(self.columns) - 1))
        if dest_idx == source_idx:
            logger.debug("move_task: at boundary, cannot move: %s", task.id)
            return None

        source = self.columns[source_idx]
        dest = self.columns[dest_idx]
        try:
            moved = source.remove_by_id(task.id)
        except TaskNotFoundError:
            logger.error(
                "Board invariant violated: selected task %s missing from %s",
                task.id,
                source.name,
            )
            return None

        self._place(moved, dest)
        self.selected_column_index = dest_idx
        self.selected_task_index = len(dest) - 1
        logger.info("Task moved: %s (%s -> %s)", moved.id, source.name, dest.name)
        return moved

    def select_previous_column(self) -> None:
        self._select_column(self.selected_column_index - 1)

    def select_next_column(self) -> None:
        self._select_column(self.selected_column_index + 1)

    def select_previous_task(self) -> None:
        self._step_task(-1)

    def select_next_task(self) -> None:
        self._step_task(1)

    # --- Private Methods ---

    def _place(self, task: Task, column: Column) -> None:
        """Append task to column and sync its status label."""
        task.status = column.name
        column.append(task)

    def _select_column(self, index: int) -> None:
        index = max(0, min(index, len(self.columns) - 1))
        if index == self.selected_column_index:
            return
        self.selected_column_index = index
        self._reset_task_selection()

    def _reset_task_selection(self) -> None:
        self.selected_task_index = None if self.selected_column.is_empty else 0

    def _step_task(self, delta: int) -> None:
        if self.selected_task_index is None:
            return
        new_index = self.selected_task_index + delta
        if 0 <= new_index < len(self.selected_column):
            self.selected_task_index = new_index

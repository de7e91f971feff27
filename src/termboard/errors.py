"""Exceptions raised by the board core and its adapters."""


class TermboardError(Exception):
    """Base exception for termboard errors."""

    pass


class TaskNotFoundError(TermboardError, KeyError):
    """A referenced task id is not present in a column."""

    def __init__(self, task_id: str) -> None:
        super().__init__(task_id)
        self.task_id = task_id

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"


class PersistenceError(TermboardError):
    """Reading or writing a board file failed."""

    pass


class InvalidInputError(TermboardError, ValueError):
    """Free-text input could not be parsed."""

    pass

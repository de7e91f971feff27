"""Data models."""

from .board import DEFAULT_COLUMNS, Board, Column, Direction
from .board_config import BoardConfig, ColumnConfig, TermboardConfig
from .task import Task

__all__ = [
    "DEFAULT_COLUMNS",
    "Board",
    "BoardConfig",
    "Column",
    "ColumnConfig",
    "Direction",
    "Task",
    "TermboardConfig",
]

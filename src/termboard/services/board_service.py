"""Service for loading and saving the board with error recovery."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ..errors import PersistenceError
from ..models import Board
from ..repositories import BoardRepositoryProtocol, export_csv, import_csv

if TYPE_CHECKING:
    from .config_service import ConfigService

logger = logging.getLogger(__name__)


class BoardService:
    """Service for board persistence.

    Wraps a repository and applies the recovery policy: a board that cannot
    be loaded is replaced by an empty one, and a failed save is reported
    instead of raised.
    """

    def __init__(
        self,
        repository: BoardRepositoryProtocol,
        config_service: ConfigService | None = None,
    ) -> None:
        self.repository = repository
        self._config_service = config_service
        self._load_error: str | None = None
        self._save_error: str | None = None

    @property
    def column_names(self) -> list[str] | None:
        """Configured column names, or None to defer to the stored board."""
        if self._config_service:
            return self._config_service.get_board_config().column_names
        return None

    @property
    def load_error(self) -> str | None:
        """Message from the last failed load, if any."""
        return self._load_error

    @property
    def save_error(self) -> str | None:
        """Message from the last failed save, if any."""
        return self._save_error

    def load_board(self) -> Board:
        """Load the board, falling back to an empty one on failure."""
        self._load_error = None
        columns = self.column_names
        try:
            return self.repository.load(columns)
        except PersistenceError as e:
            self._load_error = str(e)
            logger.warning("Could not load board, starting empty: %s", e)
            return Board.create(columns) if columns else Board.create()

    def save_board(self, board: Board) -> bool:
        """
        Save the board.

        Returns:
            True if saved. On failure the message is kept in ``save_error``.
        """
        self._save_error = None
        try:
            self.repository.save(board)
        except PersistenceError as e:
            self._save_error = str(e)
            logger.warning("Could not save board: %s", e)
            return False
        return True

    def export_csv(self, board: Board, path: Path) -> int:
        """Export board to CSV. Raises PersistenceError on failure."""
        return export_csv(board, path)

    def import_csv(self, path: Path) -> Board:
        """Build a board from CSV using the configured columns.

        Raises:
            PersistenceError: If the CSV cannot be read.
        """
        columns = self.column_names
        if columns:
            return import_csv(path, columns)
        return import_csv(path)

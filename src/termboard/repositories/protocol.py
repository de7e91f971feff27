"""Repository protocol for board storage backends."""

from collections.abc import Sequence
from typing import Protocol

from ..models import Board


class BoardRepositoryProtocol(Protocol):
    """Interface for board storage backends.

    Implementations receive their location (path or handle) explicitly so
    tests can use temporary files.
    """

    def load(self, column_names: Sequence[str] | None = None) -> Board:
        """Load the board.

        Args:
            column_names: Columns to build the board with. When None the
                backend's stored columns (or the defaults) are used.

        Returns:
            The loaded board. A missing store yields an empty board.

        Raises:
            PersistenceError: If the stored data cannot be read or parsed.
        """
        ...

    def save(self, board: Board) -> None:
        """Persist the board.

        Raises:
            PersistenceError: If the board cannot be written.
        """
        ...

"""Service layer for board loading, saving and configuration."""

from .board_service import BoardService
from .config_service import ConfigService

__all__ = [
    "BoardService",
    "ConfigService",
]

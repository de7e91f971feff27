"""Screens."""

from .board import BoardScreen
from .help import HelpScreen

__all__ = [
    "BoardScreen",
    "HelpScreen",
]

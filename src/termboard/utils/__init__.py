"""Utility functions."""

from .datetime import from_epoch, now_utc, parse_due_date, to_epoch

__all__ = [
    "from_epoch",
    "now_utc",
    "parse_due_date",
    "to_epoch",
]

"""Utilities for datetime handling."""

from datetime import datetime, timezone

from ..errors import InvalidInputError

DUE_DATE_FORMAT = "%Y-%m-%d"


def now_utc() -> datetime:
    """Get current UTC datetime, truncated to whole seconds."""
    return datetime.now(timezone.utc).replace(microsecond=0)


def to_epoch(dt: datetime) -> int:
    """Convert datetime to integer epoch seconds."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return int(dt.timestamp())


def from_epoch(value: int | float | str) -> datetime:
    """Parse epoch seconds (number or numeric string) to a UTC datetime."""
    return datetime.fromtimestamp(int(float(value)), tz=timezone.utc)


def parse_due_date(value: str) -> datetime | None:
    """
    Parse a user-entered due date.

    Accepts YYYY-MM-DD or a full ISO timestamp. Blank input means no due date.

    Raises:
        InvalidInputError: If the text is not a recognizable date.
    """
    text = value.strip()
    if not text:
        return None
    try:
        parsed = datetime.strptime(text, DUE_DATE_FORMAT)
    except ValueError:
        try:
            parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
        except ValueError as err:
            raise InvalidInputError(
                f"Invalid due date '{text}' (expected {DUE_DATE_FORMAT})"
            ) from err
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.replace(microsecond=0)


def format_due_date(value: datetime | None) -> str:
    """Format a due date for display."""
    if value is None:
        return ""
    return value.strftime(DUE_DATE_FORMAT)

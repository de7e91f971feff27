"""Task domain model."""

from collections.abc import Iterable
from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field, ValidationError

from ..errors import PersistenceError
from ..utils.datetime import from_epoch, now_utc, to_epoch


class Task(BaseModel):
    """Represents a single unit of work on the board."""

    id: str = Field(..., min_length=1)  # UUID4 string, never reassigned
    title: str
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=now_utc)
    due_date: datetime | None = None

    # Name of the owning column; written only by Board placement
    status: str | None = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str | None = None,
        tags: Iterable[str] = (),
        due_date: datetime | None = None,
    ) -> "Task":
        """Create a new task with a fresh id and creation time.

        Status is left unset; the board assigns it when placing the task.
        """
        return cls(
            id=str(uuid4()),
            title=title,
            description=description or None,
            tags=_unique_tags(tags),
            created_at=now_utc(),
            due_date=due_date,
        )

    @property
    def display_title(self) -> str:
        """Title for display - falls back to the short id."""
        if self.title.strip():
            return self.title
        return f"Untitled {self.short_id}"

    @property
    def short_id(self) -> str:
        """First eight characters of the id."""
        return self.id[:8]

    def to_record(self) -> dict:
        """Convert to the JSON record stored in the board file."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "tags": list(self.tags),
            "created_at": to_epoch(self.created_at),
            "due_date": to_epoch(self.due_date) if self.due_date else None,
            "status": self.status,
        }

    @classmethod
    def from_record(cls, record: dict) -> "Task":
        """Create Task from a stored JSON record.

        Raises:
            PersistenceError: If the record is malformed.
        """
        if not isinstance(record, dict):
            raise PersistenceError(f"Task record must be an object, got {type(record).__name__}")
        try:
            created = record.get("created_at")
            due = record.get("due_date")
            return cls(
                id=record["id"],
                title=record.get("title") or "",
                description=record.get("description"),
                tags=record.get("tags") or [],
                created_at=from_epoch(created) if created is not None else now_utc(),
                due_date=from_epoch(due) if due not in (None, "") else None,
                status=record.get("status"),
            )
        except KeyError as err:
            raise PersistenceError(f"Task record missing field: {err}") from err
        except (TypeError, ValueError, OverflowError, ValidationError) as err:
            raise PersistenceError(f"Invalid task record: {err}") from err


def _unique_tags(tags: Iterable[str]) -> list[str]:
    """Strip tags and drop blanks and duplicates, keeping first-seen order."""
    result: list[str] = []
    for tag in tags:
        tag = tag.strip()
        if tag and tag not in result:
            result.append(tag)
    return result

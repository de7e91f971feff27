"""CSV export and import.

CSV is a secondary, lossy format: there is no title column (the title is
taken from the description on import) and tags are joined with ", ", so a
tag that itself contains ", " comes back as several tags.
"""

import csv
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..errors import PersistenceError
from ..models import DEFAULT_COLUMNS, Board, Task
from ..utils.datetime import from_epoch, to_epoch

logger = logging.getLogger(__name__)

CSV_HEADER = ("id", "status", "tag", "description", "created_at", "due_date")
TAG_SEPARATOR = ", "
UNTITLED = "Untitled"


def write_csv(board: Board, stream: TextIO) -> int:
    """Write board tasks as CSV rows. Returns the number of rows written."""
    writer = csv.writer(stream)
    writer.writerow(CSV_HEADER)
    count = 0
    for column in board.columns:
        for task in column.tasks:
            writer.writerow(
                [
                    task.id,
                    column.name,
                    TAG_SEPARATOR.join(task.tags),
                    task.description or "",
                    to_epoch(task.created_at),
                    to_epoch(task.due_date) if task.due_date else "",
                ]
            )
            count += 1
    return count


def read_csv(stream: TextIO) -> list[Task]:
    """
    Parse CSV rows into tasks (status taken from the status column).

    Raises:
        PersistenceError: If the header is wrong or a row is malformed.
    """
    reader = csv.DictReader(stream)
    if reader.fieldnames is None:
        return []
    missing = [name for name in CSV_HEADER if name not in reader.fieldnames]
    if missing:
        raise PersistenceError(f"CSV header missing columns: {', '.join(missing)}")

    tasks: list[Task] = []
    for line_no, row in enumerate(reader, start=2):
        task_id = (row.get("id") or "").strip()
        if not task_id:
            raise PersistenceError(f"CSV line {line_no}: missing id")
        try:
            created_at = from_epoch(row.get("created_at") or "")
        except (ValueError, OverflowError, OSError) as e:
            raise PersistenceError(f"CSV line {line_no}: invalid created_at") from e

        description = row.get("description") or None
        tag_field = row.get("tag") or ""
        tasks.append(
            Task(
                id=task_id,
                title=description or UNTITLED,
                description=description,
                tags=[tag for tag in tag_field.split(TAG_SEPARATOR) if tag],
                created_at=created_at,
                due_date=_parse_optional_epoch(row.get("due_date")),
                status=row.get("status") or None,
            )
        )
    return tasks


def export_csv(board: Board, path: Path) -> int:
    """
    Export the board to a CSV file.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as f:
            count = write_csv(board, f)
    except OSError as e:
        raise PersistenceError(f"Cannot write {path}: {e}") from e
    logger.info("Exported %d tasks to %s", count, path)
    return count


def import_csv(path: Path, column_names: Sequence[str] = DEFAULT_COLUMNS) -> Board:
    """
    Build a board from a CSV file.

    Rows whose status is not one of ``column_names`` land in the first column.

    Raises:
        PersistenceError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            tasks = read_csv(f)
    except OSError as e:
        raise PersistenceError(f"Cannot read {path}: {e}") from e
    except (csv.Error, UnicodeDecodeError) as e:
        raise PersistenceError(f"Invalid CSV in {path}: {e}") from e
    logger.info("Imported %d tasks from %s", len(tasks), path)
    return Board.from_tasks(tasks, column_names)


def _parse_optional_epoch(value: str | None):
    """Parse an epoch field; blank or unparsable means no date."""
    if not value or not value.strip():
        return None
    try:
        return from_epoch(value)
    except (ValueError, OverflowError, OSError):
        logger.debug("Ignoring unparsable due_date: %r", value)
        return None

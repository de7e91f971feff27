"""Configuration models for termboard.yml."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .board import DEFAULT_COLUMNS


def _validate_relative_path(value: str, name: str) -> str:
    """Validate a configured path is relative and stays within the project."""
    path = Path(value)
    if path.is_absolute():
        raise ValueError(f"{name} must be a relative path")
    # Check for path traversal attempts (e.g., "../other")
    try:
        resolved = Path().resolve() / path
        resolved.resolve().relative_to(Path().resolve())
    except ValueError as err:
        raise ValueError(f"{name} must be within the project directory") from err
    return value


class ColumnConfig(BaseModel):
    """Configuration for a single board column."""

    name: str = Field(..., min_length=1)
    title: str | None = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Column names are used as status values; reject surrounding whitespace."""
        if v != v.strip():
            raise ValueError("Column name cannot start or end with whitespace")
        return v

    @property
    def display_title(self) -> str:
        """Header text (defaults to the name)."""
        return self.title or self.name


class BoardConfig(BaseModel):
    """Configuration for board columns."""

    columns: list[ColumnConfig] = Field(..., min_length=1, max_length=8)

    @field_validator("columns")
    @classmethod
    def validate_columns(cls, v: list[ColumnConfig]) -> list[ColumnConfig]:
        """Validate column names are unique."""
        names = [col.name for col in v]
        if len(names) != len(set(names)):
            raise ValueError("Column names must be unique")
        return v

    @property
    def column_names(self) -> list[str]:
        """List of column names in display order."""
        return [col.name for col in self.columns]

    def get_title(self, name: str) -> str:
        """Get display title for a column name."""
        for col in self.columns:
            if col.name == name:
                return col.display_title
        return name

    @classmethod
    def default(cls) -> "BoardConfig":
        """Return default 3-column configuration."""
        return cls(columns=[ColumnConfig(name=name) for name in DEFAULT_COLUMNS])


class TermboardConfig(BaseModel):
    """Root configuration from termboard.yml."""

    version: int = 1
    board_file: str = Field(
        default="kanban_board.json",
        description="Relative path to the JSON board file",
    )
    csv_file: str = Field(
        default=".kanban.csv",
        description="Relative path used by CSV export/import",
    )
    board: BoardConfig = Field(default_factory=BoardConfig.default)

    @field_validator("board_file")
    @classmethod
    def validate_board_file(cls, v: str) -> str:
        return _validate_relative_path(v, "board_file")

    @field_validator("csv_file")
    @classmethod
    def validate_csv_file(cls, v: str) -> str:
        return _validate_relative_path(v, "csv_file")

    @classmethod
    def default(cls) -> "TermboardConfig":
        """Return default configuration."""
        return cls(board=BoardConfig.default())

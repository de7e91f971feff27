"""Runtime settings from the environment and command line."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Process-level settings.

    Each field can be set with a ``TERMBOARD_`` environment variable
    (``TERMBOARD_BOARD_FILE=/tmp/b.json``); command line flags win.
    Board layout lives in termboard.yml, not here.
    """

    model_config = SettingsConfigDict(env_prefix="TERMBOARD_")

    project_root: Path = Field(default=Path(), description="Directory holding termboard.yml")
    board_file: Path | None = Field(
        default=None, description="JSON board file; replaces board_file from termboard.yml"
    )
    verbose: int = Field(default=0, ge=0, description="0 quiet, 1 info, 2+ debug")
    log_file: Path | None = Field(default=None, description="Also append logs to this file")

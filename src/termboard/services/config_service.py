"""Configuration service for loading termboard.yml."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..models.board_config import BoardConfig, TermboardConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading and caching application configuration."""

    CONFIG_FILE = "termboard.yml"

    def __init__(self, project_root: Path, board_file: Path | None = None) -> None:
        """Initialize the config service.

        Args:
            project_root: Directory containing termboard.yml
            board_file: Explicit board file path, overriding the config value
        """
        self.project_root = project_root
        self._board_file_override = board_file
        self._config: TermboardConfig | None = None
        self._config_error: str | None = None

    @property
    def config_path(self) -> Path:
        return self.project_root / self.CONFIG_FILE

    @property
    def has_config_error(self) -> bool:
        """Check if there was an error loading config."""
        return self._config_error is not None

    @property
    def config_error(self) -> str | None:
        """Get the config error message if any."""
        return self._config_error

    @property
    def board_file(self) -> Path:
        """Absolute location of the JSON board file."""
        if self._board_file_override is not None:
            return self._board_file_override
        return self.project_root / self.get_config().board_file

    @property
    def csv_file(self) -> Path:
        """Default location for CSV export/import."""
        return self.project_root / self.get_config().csv_file

    def get_config(self) -> TermboardConfig:
        """Get configuration, loading from file if not cached."""
        if self._config is None:
            self._config = self._load_config()
        return self._config

    def get_board_config(self) -> BoardConfig:
        """Convenience method to get board configuration."""
        return self.get_config().board

    def _load_config(self) -> TermboardConfig:
        """Read termboard.yml; any problem falls back to the defaults."""
        self._config_error = None
        path = self.config_path
        if not path.exists():
            logger.debug("No %s in %s, using defaults", self.CONFIG_FILE, self.project_root)
            return TermboardConfig.default()

        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as e:
            return self._fallback(f"Invalid YAML in {self.CONFIG_FILE}: {e}")
        except (OSError, UnicodeDecodeError) as e:
            return self._fallback(f"Cannot read {self.CONFIG_FILE}: {e}")

        if data is None:
            return self._fallback(f"{self.CONFIG_FILE} is empty")
        if not isinstance(data, dict):
            return self._fallback(f"{self.CONFIG_FILE} must be a mapping")

        try:
            config = TermboardConfig(**data)
        except (ValidationError, TypeError) as e:
            return self._fallback(f"Invalid {self.CONFIG_FILE}: {e}")

        logger.info("Loaded %s with columns %s", path, config.board.column_names)
        return config

    def _fallback(self, message: str) -> TermboardConfig:
        self._config_error = message
        logger.warning("%s; using default configuration", message)
        return TermboardConfig.default()

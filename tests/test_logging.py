"""Tests for settings and logging setup."""

import logging

import pytest
from pathlib import Path

from termboard.config import Settings
from termboard.logging import LOGGER_NAME, setup_logging


@pytest.fixture
def clean_logger():
    """Remove handlers added during a test."""
    logger = logging.getLogger(LOGGER_NAME)
    before = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in before:
            handler.close()
    logger.handlers = before
    logger.setLevel(level)


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TERMBOARD_BOARD_FILE", raising=False)
        monkeypatch.delenv("TERMBOARD_VERBOSE", raising=False)
        settings = Settings()
        assert settings.board_file is None
        assert settings.verbose == 0

    def test_environment_prefix(self, monkeypatch, tmp_path: Path):
        monkeypatch.setenv("TERMBOARD_BOARD_FILE", str(tmp_path / "b.json"))
        monkeypatch.setenv("TERMBOARD_VERBOSE", "2")

        settings = Settings()

        assert settings.board_file == tmp_path / "b.json"
        assert settings.verbose == 2

    def test_explicit_values_win(self, monkeypatch):
        monkeypatch.setenv("TERMBOARD_VERBOSE", "2")
        assert Settings(verbose=1).verbose == 1


class TestSetupLogging:
    def test_quiet_adds_no_handlers(self, clean_logger):
        count = len(clean_logger.handlers)
        setup_logging(0, None)
        assert len(clean_logger.handlers) == count

    def test_log_file_receives_records(self, clean_logger, tmp_path: Path):
        log_file = tmp_path / "logs" / "termboard.log"

        setup_logging(0, log_file)
        logging.getLogger("termboard.models.board").info("Task moved: x")
        for handler in clean_logger.handlers:
            handler.flush()

        text = log_file.read_text()
        assert "started" in text
        assert "Task moved: x" in text

    def test_debug_level(self, clean_logger):
        setup_logging(2)
        assert clean_logger.level == logging.DEBUG

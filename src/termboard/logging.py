"""Logging setup for the termboard package logger."""

import logging
import sys
from pathlib import Path

from . import __version__

LOGGER_NAME = "termboard"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: int = 0, log_file: Path | None = None) -> logging.Logger:
    """Attach handlers to the ``termboard`` logger.

    Nothing is attached when ``verbose`` is 0 and there is no ``log_file``,
    so the TUI stays clean by default. Stderr output is unsafe while the TUI
    owns the terminal; use ``--log-file`` there.

    Args:
        verbose: 0 quiet, 1 INFO, 2 or more DEBUG
        log_file: File to append log records to

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if verbose <= 0 and log_file is None:
        return logger

    level = logging.DEBUG if verbose >= 2 else logging.INFO
    logger.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if verbose > 0:
        handlers.append(logging.StreamHandler(sys.stderr))
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info("termboard %s started (level=%s)", __version__, logging.getLevelName(level))
    return logger

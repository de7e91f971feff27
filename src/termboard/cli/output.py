"""Status line helpers for CLI commands.

Markers are colored only when stdout is a terminal, so piped output and
captured test output stay plain.
"""

import sys

STYLES = {
    "success": ("✓", "\033[32m"),
    "info": ("•", "\033[34m"),
    "warning": ("!", "\033[33m"),
    "error": ("✗", "\033[31m"),
}
RESET = "\033[0m"
HEADER_COLOR = "\033[1;34m"


def _paint(text: str, color: str) -> str:
    if getattr(sys.stdout, "isatty", None) and sys.stdout.isatty():
        return f"{color}{text}{RESET}"
    return text


def _status(kind: str, message: str) -> None:
    marker, color = STYLES[kind]
    print(f"{_paint(marker, color)} {message}")


def success(message: str) -> None:
    _status("success", message)


def info(message: str) -> None:
    _status("info", message)


def warning(message: str) -> None:
    _status("warning", message)


def error(message: str) -> None:
    _status("error", message)


def header(message: str) -> None:
    """Print a section header (bold blue on a terminal)."""
    print(_paint(message, HEADER_COLOR))

"""Logging configuration with colored output for the gurka CLI."""
from __future__ import annotations
import logging
import os
import sys
from typing import Optional, TextIO


def _supports_ansi(stream: TextIO) -> bool:
    """Detect if the stream supports ANSI escape codes.

    Returns:
        True if ANSI codes are supported, False otherwise.
    """
    # https://no-color.org/
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if not hasattr(stream, "isatty") or not stream.isatty():
        return False
    if sys.platform == "win32":
        return bool(
            os.environ.get("WT_SESSION")  # Windows Terminal
            or os.environ.get("ANSICON")
            or os.environ.get("ConEmuANSI") == "ON"
            or "TERM" in os.environ  # Git Bash, Cygwin
        )
    return True


class LogColors:
    """ANSI color codes for log levels."""
    RESET = '\033[0m'
    BOLD = '\033[1m'
    DEBUG = '\033[36m'      # Cyan
    INFO = '\033[32m'       # Green
    WARNING = '\033[33m'    # Yellow
    ERROR = '\033[31m'      # Red
    CRITICAL = '\033[35m'   # Magenta
    MODULE = '\033[94m'     # Blue


class ColoredFormatter(logging.Formatter):
    """Formatter producing ``[LEVEL] module - message`` with optional colors."""

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with colors based on level.
        Args:
            record: Log record to format.

        Returns:
            Formatted string, with ANSI color codes when enabled.
        """
        message = record.getMessage()
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        if not self.use_color:
            return f"[{record.levelname}] {record.name} - {message}"
        level_color = getattr(LogColors, record.levelname, LogColors.RESET)
        colored_levelname = f"{level_color}{LogColors.BOLD}[{record.levelname}]{LogColors.RESET}"
        colored_module = f"{LogColors.MODULE}{record.name}{LogColors.RESET}"
        return f"{colored_levelname} {colored_module} - {message}"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging for the CLI.

    Diagnostics go to stderr so stdout carries only the forecast table.

    Args:
        level: Logging level (default: logging.INFO).
        stream: Handler stream (default: sys.stderr).

    Example:
        >>> from gurka.utils.logging_config import configure_logging
        >>> configure_logging(logging.DEBUG)
    """
    stream = stream if stream is not None else sys.stderr
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    # Remove existing handlers to avoid duplicates
    root_logger.handlers.clear()
    console_handler = logging.StreamHandler(stream)
    console_handler.setLevel(level)
    console_handler.setFormatter(ColoredFormatter(use_color=_supports_ansi(stream)))
    root_logger.addHandler(console_handler)
    # requests logs every connection through urllib3 at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)


__all__ = ["LogColors", "ColoredFormatter", "configure_logging"]

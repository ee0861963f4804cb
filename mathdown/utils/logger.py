"""
Logger setup.

Color-coded console output on a terminal, plain text otherwise, and an
optional UTF-8 log file. Defaults come from application settings.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

from mathdown.config.settings import get_settings


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for terminal output."""

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",     # Cyan
        "INFO": "\033[32m",      # Green
        "WARNING": "\033[33m",   # Yellow
        "ERROR": "\033[31m",     # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = (
                f"{self.BOLD}{self.COLORS[levelname]}{levelname}{self.RESET}"
            )
        try:
            return super().format(record)
        finally:
            # Other handlers see the record after us
            record.levelname = levelname


def setup_logger(
    name: str,
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    use_color: bool = True,
) -> logging.Logger:
    """
    Setup and configure a logger.

    Args:
        name: Logger name (usually __name__)
        level: Log level name; falls back to ``Settings.log_level``
        log_file: Optional file path; falls back to ``Settings.log_file``
        use_color: Whether to color console output on a TTY

    Returns:
        Configured logger instance
    """
    settings = get_settings()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, (level or settings.log_level).upper()))

    if logger.handlers:
        return logger

    logger.propagate = False

    # stderr keeps stdout clean for rendered HTML
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG)
    if use_color and sys.stderr.isatty():
        console_handler.setFormatter(ColoredFormatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    else:
        console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(console_handler)

    log_file = log_file or settings.log_file
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get an existing logger or create a bare one."""
    return logging.getLogger(name)

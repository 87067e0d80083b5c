"""
Centralized logging configuration for backup-manager-console.

Console output is colored when attached to a TTY, and an optional file
handler captures everything at DEBUG level.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name for console output."""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True):
        super().__init__(fmt)
        self.use_color = use_color and sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        if self.use_color:
            levelname = record.levelname
            if levelname in self.COLORS:
                record = logging.makeLogRecord(record.__dict__)
                record.levelname = f"{self.COLORS[levelname]}{levelname}{self.COLORS['RESET']}"
        return super().format(record)


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[Path] = None,
    verbose: bool = False
) -> logging.Logger:
    """
    Configure logging for the console commands.

    Args:
        level: Log level name. If None, reads BACKUP_MANAGER_LOG_LEVEL
               or defaults to WARNING so diagnostics stay out of prompts.
        log_file: Optional path to a log file (always DEBUG).
        verbose: Force DEBUG on the console.

    Returns:
        The configured package logger.
    """
    if verbose:
        log_level = logging.DEBUG
    elif level:
        log_level = getattr(logging, level.upper(), logging.WARNING)
    else:
        env_level = os.getenv('BACKUP_MANAGER_LOG_LEVEL', 'WARNING').upper()
        log_level = getattr(logging, env_level, logging.WARNING)

    package_logger = logging.getLogger('backup_console')
    package_logger.setLevel(logging.DEBUG if log_file else log_level)
    package_logger.propagate = False

    # Remove existing handlers to avoid duplicates on repeated setup
    package_logger.handlers.clear()

    # Diagnostics go to stderr so they never interleave with table output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)

    console_format = '%(levelname)-8s %(message)s'
    if log_level == logging.DEBUG:
        console_format = '%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s'

    console_handler.setFormatter(ColoredFormatter(console_format))
    package_logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG)

        file_format = '%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s'
        file_handler.setFormatter(logging.Formatter(file_format))
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Module initialized")
    """
    return logging.getLogger(name)

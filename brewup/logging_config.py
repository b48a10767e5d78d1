"""
Centralized logging configuration for brewup.

Progress lines and verbose traces go to stdout, warnings and errors go to
stderr. An optional log file receives everything with timestamps.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOGGER_NAME = "brewup"

# Global logger instance
_logger: Optional[logging.Logger] = None


class _MaxLevelFilter(logging.Filter):
    """Pass only records strictly below the given level."""

    def __init__(self, max_level: int):
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[str] = None,
    propagate: bool = False,
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        verbose: Enable verbose (DEBUG) output
        quiet: Only show warnings and errors on the console
        log_file: Optional file path for log output
        propagate: Allow log propagation (useful for testing)

    Returns:
        Configured logger instance
    """
    global _logger

    if verbose:
        effective_level = logging.DEBUG
    elif quiet:
        effective_level = logging.WARNING
    else:
        effective_level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if log_file else effective_level)

    # Clear existing handlers
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    # stdout: progress and verbose traces
    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setLevel(effective_level)
    stdout_handler.addFilter(_MaxLevelFilter(logging.WARNING))
    stdout_handler.setFormatter(ColoredFormatter(use_colors=sys.stdout.isatty()))
    logger.addHandler(stdout_handler)

    # stderr: failures
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    stderr_handler.setFormatter(ColoredFormatter(use_colors=sys.stderr.isatty()))
    logger.addHandler(stderr_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # Always log everything to file
        file_handler.setFormatter(logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
        logger.addHandler(file_handler)

    logger.propagate = propagate

    _logger = logger
    return logger


def get_logger() -> logging.Logger:
    """
    Get the configured logger instance.

    If logging hasn't been set up, initializes with defaults.
    """
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


class ColoredFormatter(logging.Formatter):
    """
    Console formatter with a per-level prefix and optional ANSI colors.

    INFO lines carry no prefix so regular progress output reads as plain text.
    """

    # ANSI color codes
    COLORS = {
        "DEBUG": "\033[36m",      # Cyan
        "INFO": "",
        "WARNING": "\033[33m",    # Yellow
        "ERROR": "\033[31m",      # Red
        "CRITICAL": "\033[1;31m", # Bold Red
    }
    RESET = "\033[0m"

    PREFIXES = {
        "DEBUG": "[VERBOSE]",
        "INFO": "",
        "WARNING": "[WARNING]",
        "ERROR": "[ERROR]",
        "CRITICAL": "[CRITICAL]",
    }

    def __init__(self, use_colors: bool = True):
        super().__init__("%(message)s")
        self.use_colors = use_colors

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        prefix = self.PREFIXES.get(record.levelname, "")
        if not prefix:
            return message

        if self.use_colors:
            color = self.COLORS.get(record.levelname, "")
            prefix = f"{color}{prefix}{self.RESET}"
        return f"{prefix} {message}"

"""Logging configuration for wikicomplete using loguru."""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

# Store the configured log file path to ensure consistency
_log_file_path: Optional[Path] = None


def default_log_path() -> Path:
    """Return the conventional location of the log file."""
    return Path.home() / ".local" / "state" / "wikicomplete" / "wikicomplete.log"


def setup_logger(
    log_file: Optional[str | Path] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Configure loguru logger with file and console output.

    Args:
        log_file: Path to the log file (if None, uses the previously configured path or default)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
    """
    global _log_file_path

    if log_file is None:
        if _log_file_path is None:
            _log_file_path = default_log_path()
        log_file = _log_file_path
    else:
        log_file = Path(log_file).expanduser()
        _log_file_path = log_file

    log_file.parent.mkdir(parents=True, exist_ok=True)

    # Remove default handler
    logger.remove()
    logger.configure(extra={"name": "wikicomplete"})
    logger.enable("wikicomplete")

    # The Textual editor owns the terminal, so console output is opt-in
    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{extra[name]}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    logger.add(
        log_file,
        level=log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[name]}:{function}:{line} - {message}",
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
    )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    return logger.bind(name=name or "wikicomplete")

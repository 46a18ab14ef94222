"""Logging configuration for LOOT Manager.

Provides centralized logging setup with file and console handlers.
The log file is stored in the application's data directory.
"""

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "LOOTDebugLog.txt"


def setup_logging(log_dir: Path, debug: bool = False) -> logging.Logger:
    """Configure application-wide logging.

    Sets up logging to a file in the data directory and, in debug mode,
    to the console as well.

    Args:
        log_dir: Directory that will hold the log file
        debug: If True, also log to console at DEBUG level

    Returns:
        The root logger for the application
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    logger = logging.getLogger("loot_manager")
    logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    logger.handlers.clear()

    # File handler - always logs DEBUG and above
    file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    # Console handler - only in debug mode
    if debug:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.DEBUG)
        console_formatter = logging.Formatter(
            "%(levelname)s - %(name)s - %(message)s"
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger for a specific module.

    Args:
        name: Module name (e.g., 'xbox', 'state')

    Returns:
        A logger instance for the module
    """
    return logging.getLogger(f"loot_manager.{name}")

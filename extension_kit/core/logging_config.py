"""
Logging Configuration Module.

This module provides centralized logging configuration for extension-kit.

Features:
- Configurable log levels per module
- Console and file logging
- Structured logging with JSON format support

The library never configures logging on import; applications opt in by
calling ``setup_logging()``.
"""

import logging
from pathlib import Path
from typing import Optional

from extension_kit.core.config import settings

LOG_LEVEL = settings.logging.level.upper()
LOG_FORMAT = settings.logging.format
LOG_FILE_DIR = settings.logging.file_dir
ENABLE_FILE_LOGGING = settings.logging.enable_file


# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)

LOG_FILE_NAME = "extension_kit.log"


# Module-specific log levels
MODULE_LOG_LEVELS = {
    "extension_kit": "INFO",
    "extension_kit.extensions": "INFO",
    "extension_kit.introspection": "INFO",
}


def _format_for(fmt: str) -> str:
    if fmt == "json":
        return JSON_FORMAT
    if fmt == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: bool = ENABLE_FILE_LOGGING,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for the application.

    Args:
        log_level: Override default log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override default format (simple, detailed, json)
        enable_file: Whether to enable file logging
        log_file_dir: Override the directory holding the log file
    """
    level = (log_level or LOG_LEVEL).upper()
    fmt = log_format or LOG_FORMAT

    formatter = logging.Formatter(_format_for(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture all levels, filter at handler level

    # Remove existing handlers to avoid duplicates
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if enable_file:
        log_dir = Path(log_file_dir or LOG_FILE_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)  # Always log DEBUG to file
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # A module-specific level never hides records the console would show.
    for module_name, module_level in MODULE_LOG_LEVELS.items():
        module_logger = logging.getLogger(module_name)
        module_logger.setLevel(min(logging.getLevelName(module_level), logging.getLevelName(level)))

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={enable_file}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)

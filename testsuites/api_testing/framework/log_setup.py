"""
================================================================================
Logging Setup
================================================================================

Centralized Loguru configuration for the API test suites.

Settings are read from configuration.properties (or the environment):
    LOG_LEVEL     sink level, default INFO
    LOG_FORMAT    Loguru format string
    LOG_FILE      optional file sink with rotation and retention

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from .config_manager import ConfigManager


DEFAULT_LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} | {message}"
)

_logger_initialized: bool = False


def init_logger(
    level: Optional[str] = None,
    config: Optional[ConfigManager] = None,
) -> None:
    """
    Initialize the global Loguru logger once per process.

    Args:
        level: Log level override (DEBUG, INFO, WARNING, ERROR)
        config: Configuration manager. Created on demand.
    """
    global _logger_initialized

    if _logger_initialized:
        return

    config = config or ConfigManager()
    log_level = (level or config.get("LOG_LEVEL", "INFO")).upper()
    log_format = config.get("LOG_FORMAT", DEFAULT_LOG_FORMAT)

    logger.remove()
    logger.add(
        sys.stderr,
        level=log_level,
        format=log_format,
        colorize=True,
        backtrace=True,
        diagnose=True,
    )

    log_file = config.get("LOG_FILE")
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_file,
            level=log_level,
            format=log_format.replace("{level: <8}", "{level}"),
            rotation=config.get("LOG_ROTATION", "10 MB"),
            retention=config.get("LOG_RETENTION", "7 days"),
            compression="zip",
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {log_level}")


def reset_logger() -> None:
    """Allow init_logger to run again (for testing)."""
    global _logger_initialized
    _logger_initialized = False


__all__ = [
    "init_logger",
    "reset_logger",
]

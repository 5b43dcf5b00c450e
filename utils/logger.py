# -*- coding: utf-8 -*-
"""
Logging configuration.

All modules log through children of one application logger whose name,
levels, format and rotating log file come from Config.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

# Set by setup_logger
_logger: Optional[logging.Logger] = None


def _level(name: str, default: int) -> int:
    """Resolve a level name such as "INFO"; unknown names give the default."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else default


def setup_logger() -> logging.Logger:
    """
    Configure the application logger.

    The file handler records everything at Config.LOG_LEVEL and above;
    the console shows Config.CONSOLE_LOG_LEVEL and above. Calling it again
    replaces the handlers instead of stacking them.
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    Config.LOGS_DIR.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(Config.LOGGER_NAME)
    file_level = _level(Config.LOG_LEVEL, logging.DEBUG)
    console_level = _level(Config.CONSOLE_LOG_LEVEL, logging.INFO)
    logger.setLevel(min(file_level, console_level))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        Config.LOG_PATH,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(file_level)
    file_handler.setFormatter(logging.Formatter(Config.LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter("%(levelname)-8s | %(message)s"))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child of the application logger for a module.

    Module names like "services.auth_service" become
    "docflow.services.auth_service".
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    prefix = f"{_logger.name}."
    if name.startswith(prefix):
        name = name[len(prefix):]
    return _logger.getChild(name)

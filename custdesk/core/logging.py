"""
Logging configuration for custdesk.

Provides consistent log formatting across all modules.
"""

import logging
import sys
from typing import Dict, Optional

_loggers: Dict[str, logging.Logger] = {}

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _configured_level() -> int:
    """Level named under logging.level in config.yaml, INFO when unset or unknown."""
    from custdesk.core.config import get_config_value

    try:
        name = get_config_value("logging", "level", default="INFO")
    except FileNotFoundError:
        return logging.INFO
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Get a configured logger for a module.

    Log lines go to stderr so they never mix with CLI output on stdout.

    Args:
        name: Logger name (e.g., 'custdesk.customers.store')
        level: Logging level (default: logging.level from config.yaml)

    Returns:
        Configured logger
    """
    if name in _loggers:
        return _loggers[name]

    if level is None:
        level = _configured_level()

    logger = logging.getLogger(name)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    _loggers[name] = logger
    return logger

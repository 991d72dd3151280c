import logging
import os
import sys
from typing import List, Optional

# Configure logging format
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
LEVEL_ENV_VAR = 'FLASHCARDS_LOG_LEVEL'

_configured: List[str] = []  # loggers owning a handler
_loggers: List[str] = []


def default_level() -> int:
    """Log level named by FLASHCARDS_LOG_LEVEL, WARNING if unset or unknown."""
    name = os.environ.get(LEVEL_ENV_VAR, '').upper()
    level = logging.getLevelName(name) if name else logging.WARNING
    return level if isinstance(level, int) else logging.WARNING


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Sets up a logger with consistent formatting.

    Records go to stderr; stdout belongs to the interactive session.

    Args:
        name: Name of the logger (typically __name__ from the calling module)
        level: Logging level (default: from FLASHCARDS_LOG_LEVEL, else WARNING)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = default_level()
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if name not in _loggers:
        _loggers.append(name)

    # Avoid adding handlers multiple times; children reach a parent's handler by propagation
    has_parent_handler = any(name.startswith(parent + '.') for parent in _configured)
    if not logger.handlers and not has_parent_handler:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        logger.addHandler(console_handler)
        _configured.append(name)

    return logger


def set_level(level: int):
    """Change the level of every logger created through setup_logger."""
    for name in _loggers:
        logging.getLogger(name).setLevel(level)

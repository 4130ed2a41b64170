"""Logger factory shared by the keystore package and its command line."""

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_LEVEL_ENV = "KEYSTORE_LOG_LEVEL"


def parse_level(name: Optional[str]) -> Optional[int]:
    """Map a level name such as 'debug' to its logging constant, None if unknown."""
    if not name:
        return None
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def _default_level(logger_name: str) -> int:
    from_env = parse_level(os.getenv(LOG_LEVEL_ENV))
    if from_env is not None:
        return from_env
    # the CLI narrates its progress, library modules stay quiet
    return logging.INFO if logger_name.endswith(".cli") else logging.WARNING


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    Return a named logger writing to stderr.

    The handler is attached once per name. Without an explicit level, a new
    logger takes KEYSTORE_LOG_LEVEL or the module default; an explicit level
    is applied on every call.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        if level is None:
            level = _default_level(name)

    if level is not None:
        logger.setLevel(level)
    return logger

import logging
import sys
from typing import Optional

from trendrank.config import settings

_CONFIGURED_LOGGERS: set[str] = set()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger writing to stdout.

    Level comes from LOG_LEVEL; DEBUG_LOG=1 forces DEBUG.
    Idempotent per logger name to avoid duplicate handlers.
    """
    logger_name = name or "trendrank"
    logger = logging.getLogger(logger_name)

    if logger_name in _CONFIGURED_LOGGERS:
        return logger

    if settings.debug_log:
        level = logging.DEBUG
    else:
        level = getattr(logging, settings.log_level.upper(), logging.INFO)
    logger.setLevel(level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))

    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED_LOGGERS.add(logger_name)
    return logger

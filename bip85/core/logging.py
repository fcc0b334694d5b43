"""
Logger factory. Every module asks for `get_logger(__name__)`; the level comes from BIP85_LOG_LEVEL unless a caller
passes one.
"""
import logging
import os
import sys
from pathlib import Path
from typing import Optional

__all__ = ["get_logger", "resolve_level", "LOG_LEVEL_ENV", "DEFAULT_LOG_LEVEL"]

LOG_LEVEL_ENV = "BIP85_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FORMAT = '%(asctime)s [%(name)s] [%(levelname)s]: %(message)s'


def resolve_level(log_level: Optional[str] = None) -> int:
    """
    Explicit level, then $BIP85_LOG_LEVEL, then WARNING. Unknown names fall back to WARNING
    """
    name = (log_level or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def get_logger(name: str, log_level: Optional[str] = None, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger writing to stdout, and to `log_file` when given.

    Args:
        name: Logger name, the calling module's __name__
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL. See resolve_level
        log_file: Optional path for a persistent log
        format_string: Optional format replacing DEFAULT_FORMAT
    """
    logger = logging.getLogger(name)

    # Configured once per name
    if logger.handlers:
        return logger

    logger.setLevel(resolve_level(log_level))
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    handlers = [logging.StreamHandler(stream=sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger

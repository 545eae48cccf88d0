"""
Centralized logging utility.

Provides a consistent, structured logger for the core services and the
NiceGUI frontend. Frontend loggers carry a ``FRONTEND`` tag so both
halves can share one stderr stream.
"""

import logging
import os
import sys
from typing import Optional

# Read log level from environment (default: INFO)
LOG_LEVEL = os.getenv("SHAMBAGO_LOG_LEVEL", "INFO").upper()


def get_logger(
    name: Optional[str] = None,
    tag: Optional[str] = None,
    level: Optional[str] = None,
) -> logging.Logger:
    """
    Create or retrieve a configured logger instance.

    Args:
        name (Optional[str]): Logger name (usually __name__).
        tag (Optional[str]): Component tag printed after the level,
            e.g. ``FRONTEND``.
        level (Optional[str]): Overrides ``SHAMBAGO_LOG_LEVEL``.

    Returns:
        logging.Logger: Configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level or LOG_LEVEL)

    # NiceGUI re-imports page modules on reload; keep one handler
    if logger.handlers:
        return logger

    handler = logging.StreamHandler(sys.stderr)

    prefix = f"%(levelname)-8s | {tag} |" if tag else "%(levelname)-8s |"
    formatter = logging.Formatter(
        fmt=f"%(asctime)s | {prefix} %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    logger.propagate = False

    return logger

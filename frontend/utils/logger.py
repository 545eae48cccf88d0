import logging
import os

from shambago.common.logger import get_logger as _get_logger

LOG_LEVEL = os.getenv("SHAMBAGO_FRONTEND_LOG_LEVEL", "INFO").upper()


def get_logger(name: str) -> logging.Logger:
    return _get_logger(name, tag="FRONTEND", level=LOG_LEVEL)

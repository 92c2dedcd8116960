"""Logging setup. Modules only ever call `logging.getLogger(__name__)`; the entry point decides where records go."""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "src"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(level: str = "INFO", name: Optional[str] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    A logger that already has handlers is returned untouched, so the first entry point to call this decides the level.
    """
    logger = logging.getLogger(name or ROOT_LOGGER_NAME)
    if logger.handlers:
        return logger

    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)
    return logger

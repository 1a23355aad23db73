"""Structured logging for bridge events (subscribe, deliver, drain)."""

import logging
import sys
from typing import Union

ROOT_LOGGER_NAME = "bridge"


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Attach the stdout handler to the ``bridge`` logger once and set its level."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
            )
        )
        logger.addHandler(handler)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the configured ``bridge`` hierarchy."""
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not root.handlers:
        configure_logging()
    return logging.getLogger(name)

"""Logging helpers for scripts embedding the account manager."""

import logging
from typing import Optional

LOGGER_NAME = "officer_roster"
LOG_FORMAT = "Account Manager: %(levelname)s %(message)s"

_handler: Optional[logging.Handler] = None


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Idempotent. The root logger is left alone.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if _handler is None:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if _handler not in logger.handlers:
        logger.addHandler(_handler)
    return logger

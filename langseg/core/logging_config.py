"""Logging configuration for the langseg package."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Safe to call more than once: the handler is only installed the first
    time, later calls just update the level.

    Args:
        level: Logging level name or number

    Returns:
        The configured ``langseg`` logger
    """
    logger = logging.getLogger("langseg")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger

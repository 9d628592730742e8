"""Logging setup for stylecheck."""

import logging
import os
import sys

LOG_LEVEL_ENV_VAR = "STYLECHECK_LOG_LEVEL"

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure the stylecheck logger to write to stderr.

    Args:
        level: Log level name; defaults to STYLECHECK_LOG_LEVEL, then WARNING

    Returns:
        The package logger
    """
    level_name = (level or os.getenv(LOG_LEVEL_ENV_VAR) or "WARNING").upper()

    logger = logging.getLogger("stylecheck")
    logger.setLevel(getattr(logging, level_name, logging.WARNING))
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(handler)
    logger.propagate = False

    return logger

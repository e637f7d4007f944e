"""Logging set-up for the command line tools.

The library modules only create loggers under the ``cfdimx`` namespace; the
handlers are installed here by the entry points that need them.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "cfdimx"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(
    level: int | str = logging.WARNING, log_file: Path | None = None
) -> logging.Logger:
    """Configure the ``cfdimx`` logger with a stream handler.

    When ``log_file`` is given a rotating file handler is added for it, unless
    one already writes to that file. Calling the function again never
    duplicates handlers.
    """

    logger = logging.getLogger(LOGGER_NAME)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        stream = logging.StreamHandler()
        stream.setFormatter(formatter)
        logger.addHandler(stream)

    if log_file is not None and not _has_file_handler(logger, log_file):
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file,
            maxBytes=1_000_000,
            backupCount=5,
            encoding="utf-8",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.propagate = False
    logger.setLevel(level)
    return logger


def _has_file_handler(logger: logging.Logger, log_file: Path) -> bool:
    target = os.path.abspath(log_file)
    return any(
        isinstance(handler, RotatingFileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


__all__ = ["LOGGER_NAME", "LOG_FORMAT", "configure_logging"]

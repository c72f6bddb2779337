"""Logging for the ``beamdesign`` package.

Engine modules log through ``logging.getLogger(__name__)`` and never add
handlers themselves. Applications (the demo script, the API lifespan) call
:func:`setup_logging` once to route those records to a rotating log file and
the console. Calling it again only adjusts the level.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler

PACKAGE_LOGGER = "beamdesign"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
MAX_LOG_BYTES = 2_000_000
LOG_BACKUPS = 3


def _apply_level(logger: logging.Logger, level: int | str) -> None:
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.setLevel(level)


def setup_logging(
    log_dir: str = "logs",
    log_name: str = "beamdesign.log",
    level: int | str = logging.INFO,
) -> logging.Logger:
    """Attach a rotating file handler and a console handler to the package logger.

    Returns the configured ``beamdesign`` logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if logger.handlers:
        _apply_level(logger, level)
        return logger

    os.makedirs(log_dir, exist_ok=True)
    log_path = os.path.join(log_dir, log_name)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = [
        RotatingFileHandler(
            log_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        ),
        logging.StreamHandler(),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    _apply_level(logger, level)

    logger.info("Logging initialised. File: %s", log_path)
    return logger

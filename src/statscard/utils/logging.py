"""Logging setup shared by the command line entry points."""

from __future__ import annotations

import logging

DEFAULT_FORMAT = "%(levelname)s:%(name)s:%(message)s"


def get_logger(name: str = "statscard", level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> logging.Logger:
    """Return the ``name`` logger with a single stream handler attached.

    Library modules log through ``logging.getLogger(__name__)`` and inherit
    this configuration, so it is enough to call this once for the package
    logger.  Repeated calls only adjust the level.
    """

    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger

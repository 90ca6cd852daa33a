"""Logging bootstrap for processes that use envkit directly."""

from __future__ import annotations

import contextlib
import logging

from ..config.logging import ENVKIT_LOG_DATEFMT, ENVKIT_LOG_FORMAT, ENVKIT_LOG_LEVEL


def configure_logging() -> None:
    """Initialize root logging configuration once per process.

    Existing handlers are re-leveled and re-formatted instead of being
    replaced, so calling this more than once never duplicates output.
    """
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(level=ENVKIT_LOG_LEVEL, format=ENVKIT_LOG_FORMAT, datefmt=ENVKIT_LOG_DATEFMT)
    else:
        root_logger.setLevel(ENVKIT_LOG_LEVEL)
        for handler in root_logger.handlers:
            with contextlib.suppress(Exception):
                handler.setLevel(ENVKIT_LOG_LEVEL)
                handler.setFormatter(logging.Formatter(ENVKIT_LOG_FORMAT, datefmt=ENVKIT_LOG_DATEFMT))

    logging.getLogger("envkit").setLevel(ENVKIT_LOG_LEVEL)


__all__ = ["configure_logging"]

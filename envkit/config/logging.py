"""Library logging configuration values."""

import os


ENVKIT_LOG_LEVEL = (os.getenv("ENVKIT_LOG_LEVEL", "INFO") or "INFO").upper()
ENVKIT_LOG_FORMAT = os.getenv(
    "ENVKIT_LOG_FORMAT",
    "%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s",
)
ENVKIT_LOG_DATEFMT = os.getenv("ENVKIT_LOG_DATEFMT", "%Y-%m-%dT%H:%M:%S")


__all__ = [
    "ENVKIT_LOG_LEVEL",
    "ENVKIT_LOG_FORMAT",
    "ENVKIT_LOG_DATEFMT",
]

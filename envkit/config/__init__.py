"""Aggregator of configuration modules.

This module re-exports the config API from smaller modules:
- env: accessor parsing rules and failure messages
- timestamp: clock unit conversions
- logging: library log level and format
"""

from .env import (
    DEFAULT_ARRAY_SEPARATOR,
    MUST_GET_QUOTE_CHARS,
    MUST_GET_QUOTE_PASSES,
    DEFAULT_QUOTE_CHARS,
    ARRAY_BRACKET_CHARS,
    WHITESPACE_CHARS,
    UINT32_MAX,
    MISSING_ENV_MESSAGE,
    EMPTY_ARRAY_ENV_MESSAGE,
)
from .timestamp import (
    NANOS_PER_SECOND,
    NANOS_PER_MILLISECOND,
    INT64_MIN,
    INT64_MAX,
)
from .logging import (
    ENVKIT_LOG_LEVEL,
    ENVKIT_LOG_FORMAT,
    ENVKIT_LOG_DATEFMT,
)

__all__ = [
    # env
    "DEFAULT_ARRAY_SEPARATOR",
    "MUST_GET_QUOTE_CHARS",
    "MUST_GET_QUOTE_PASSES",
    "DEFAULT_QUOTE_CHARS",
    "ARRAY_BRACKET_CHARS",
    "WHITESPACE_CHARS",
    "UINT32_MAX",
    "MISSING_ENV_MESSAGE",
    "EMPTY_ARRAY_ENV_MESSAGE",
    # timestamp
    "NANOS_PER_SECOND",
    "NANOS_PER_MILLISECOND",
    "INT64_MIN",
    "INT64_MAX",
    # logging
    "ENVKIT_LOG_LEVEL",
    "ENVKIT_LOG_FORMAT",
    "ENVKIT_LOG_DATEFMT",
]

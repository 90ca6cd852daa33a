"""envkit: typed environment variables and UTC clock helpers.

Reads flat string-valued configuration from the process environment and
coerces it into strings, booleans, unsigned integers and string lists, with
default fallback for optional settings and fail-fast errors for required
ones. A companion clock module works in UTC and converts between
epoch-nanosecond integers and RFC3339-nanosecond text.

Architecture Overview:
    - config/: Declarative constants (parsing rules, log settings)
    - env/: EnvAccessor and process-environment functions
    - clock/: UTC time access and timestamp conversion
    - errors/: Exception hierarchy and classification
    - runtime/: fatal_boundary for turning fatal errors into an exit
    - logging/: configure_logging

Example:
    >>> from envkit import env, fatal_boundary
    >>> with fatal_boundary():
    ...     hosts = env.must_get_array("PEER_HOSTS")
    ...     port = env.get_uint_or("PORT", 8080)

Environment Variables:
    Optional:
        - ENVKIT_LOG_LEVEL: Level applied by configure_logging (default: INFO)
        - ENVKIT_LOG_FORMAT: Log record format
        - ENVKIT_LOG_DATEFMT: Log timestamp format
"""

from . import clock, env
from .env import EnvAccessor
from .logging import configure_logging
from .runtime import fatal_boundary
from .errors import (
    FatalEnvError,
    MissingEnvError,
    EmptyArrayEnvError,
    InvalidEnvValueError,
    TimestampParseError,
    classify_error,
)

__all__ = [
    "clock",
    "env",
    "EnvAccessor",
    "configure_logging",
    "fatal_boundary",
    "FatalEnvError",
    "MissingEnvError",
    "EmptyArrayEnvError",
    "InvalidEnvValueError",
    "TimestampParseError",
    "classify_error",
]

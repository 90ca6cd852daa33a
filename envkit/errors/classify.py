"""Exception classification helpers for log and exit labels."""

from __future__ import annotations

from .timestamp import TimestampParseError
from .env import EmptyArrayEnvError, InvalidEnvValueError, MissingEnvError

# Subclasses must precede their bases
ERROR_CATEGORIES: tuple[tuple[type[BaseException], str], ...] = (
    (EmptyArrayEnvError, "empty_array_env"),
    (MissingEnvError, "missing_env"),
    (InvalidEnvValueError, "invalid_env"),
    (TimestampParseError, "timestamp_parse"),
)


def classify_error(exc: BaseException) -> str:
    """Map an exception to a short category label."""

    for cls, label in ERROR_CATEGORIES:
        if isinstance(exc, cls):
            return label
    return "unknown"


__all__ = ["ERROR_CATEGORIES", "classify_error"]

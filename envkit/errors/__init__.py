"""Centralized exception classes for envkit.

This module re-exports all domain-specific exceptions from their respective
modules, providing a single import point for error handling.

Organization:
    - env.py: Fail-fast configuration errors (missing, empty list, invalid)
    - timestamp.py: Recoverable timestamp parse errors
    - classify.py: Exception-to-label mapping
"""

from .classify import classify_error
from .timestamp import TimestampParseError
from .env import (
    FatalEnvError,
    MissingEnvError,
    EmptyArrayEnvError,
    InvalidEnvValueError,
)

__all__ = [
    # Fail-fast configuration errors
    "FatalEnvError",
    "MissingEnvError",
    "EmptyArrayEnvError",
    "InvalidEnvValueError",
    # Timestamps
    "TimestampParseError",
    # Classification
    "classify_error",
]

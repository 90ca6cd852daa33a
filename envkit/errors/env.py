"""Fail-fast configuration exceptions.

These exceptions signal that the process cannot run with its current
environment. They are raised by the required accessors and by the unsigned
integer parse path, and are meant to be handled once at a process boundary
(see ``envkit.runtime.fatal_boundary``) rather than at the call site.
"""

from ..config.env import MISSING_ENV_MESSAGE, EMPTY_ARRAY_ENV_MESSAGE


class FatalEnvError(Exception):
    """Base class for configuration errors that should halt the process.

    Attributes:
        name: The environment variable that caused the failure.
    """

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.message = message


class MissingEnvError(FatalEnvError):
    """Raised when a required variable is unset or empty."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(name, message or MISSING_ENV_MESSAGE % name)


class EmptyArrayEnvError(MissingEnvError):
    """Raised when a required list variable yields no elements."""

    def __init__(self, name: str) -> None:
        super().__init__(name, EMPTY_ARRAY_ENV_MESSAGE % name)


class InvalidEnvValueError(FatalEnvError, ValueError):
    """Raised when a variable holds a value that cannot be coerced.

    The message names the variable only; the value may be a secret and is
    kept on the exception for callers that choose to inspect it.

    Attributes:
        value: The offending string after quote trimming.
    """

    def __init__(self, name: str, value: str, reason: str) -> None:
        super().__init__(name, f"invalid env var - {name}: {reason}")
        self.value = value
        self.reason = reason


__all__ = [
    "FatalEnvError",
    "MissingEnvError",
    "EmptyArrayEnvError",
    "InvalidEnvValueError",
]

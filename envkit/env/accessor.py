"""Typed accessors over a flat string-valued environment."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from ..config.env import DEFAULT_ARRAY_SEPARATOR
from ..errors.env import EmptyArrayEnvError, InvalidEnvValueError, MissingEnvError
from .parsing import (
    format_bool,
    parse_bool,
    parse_uint32,
    split_array,
    strip_double_quotes,
    strip_quote_layers,
)

logger = logging.getLogger(__name__)


class EnvAccessor:
    """Resolve named variables into application values.

    The accessor never copies or caches its source: every call reads the
    mapping again, so changes made between calls are always observed. With no
    explicit source it reads the live ``os.environ``.

    Unset and set-to-empty are indistinguishable; both read as ``""``.
    """

    def __init__(self, source: Mapping[str, str] | None = None) -> None:
        self._source = source

    @property
    def source(self) -> Mapping[str, str]:
        return os.environ if self._source is None else self._source

    def get(self, name: str) -> str:
        """Return the raw value, or ``""`` when unset."""
        return self.source.get(name, "")

    def must_get(self, name: str) -> str:
        """Return a required value with surrounding quote layers removed.

        Raises:
            MissingEnvError: If the variable is unset or empty.
        """
        value = self.get(name)
        if value == "":
            raise MissingEnvError(name)
        return strip_quote_layers(value)

    def exists(self, name: str) -> bool:
        return self.get(name) != ""

    def get_or(self, name: str, default: str) -> str:
        """Return the value or *default*, trimming surrounding double quotes."""
        value = self.get(name)
        if value == "":
            logger.debug("env var %s unset; using default", name)
            value = default
        return strip_double_quotes(value)

    def get_bool_or(self, name: str, default: bool) -> bool:
        """Return True only when the resolved value is ``"true"`` (any case)."""
        return parse_bool(self.get_or(name, format_bool(default)))

    def get_uint_or(self, name: str, default: int) -> int:
        """Return an unsigned 32-bit integer value.

        The default only covers absence. A value that is present but
        malformed is an error even though a default was supplied.

        Raises:
            InvalidEnvValueError: If the resolved value is not a base-10
                unsigned 32-bit integer.
        """
        value = self.get_or(name, str(default))
        try:
            return parse_uint32(value)
        except ValueError as exc:
            raise InvalidEnvValueError(name, value, str(exc)) from exc

    def get_array(
        self,
        name: str,
        sep: str = DEFAULT_ARRAY_SEPARATOR,
        allow_quotes: bool = False,
        trim_quoted: bool = False,
    ) -> list[str]:
        """Return the list elements of a delimited variable.

        Accepts both ``a,b,c`` and ``[a,b,c]``. Returns an empty list when the
        variable is unset or holds no non-empty elements.
        """
        return split_array(self.get_or(name, ""), sep, allow_quotes, trim_quoted)

    def must_get_array(
        self,
        name: str,
        sep: str = DEFAULT_ARRAY_SEPARATOR,
        allow_quotes: bool = False,
        trim_quoted: bool = False,
    ) -> list[str]:
        """Like ``get_array`` but at least one element is required.

        Raises:
            EmptyArrayEnvError: If the variable yields no elements.
        """
        values = self.get_array(name, sep, allow_quotes, trim_quoted)
        if not values:
            raise EmptyArrayEnvError(name)
        return values


__all__ = ["EnvAccessor"]

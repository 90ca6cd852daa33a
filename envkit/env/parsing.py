"""String rules behind the environment accessors.

Everything here is a pure function of its input. The accessor layer decides
where raw values come from and which errors to raise; these helpers only
transform text.

Trimming uses cut-set semantics throughout: stripping ``'"'`` removes the
whole run of double quotes at each end, not a single character. Whitespace
means Unicode White_Space only; control characters such as ``\\x1f`` are
kept.
"""

from __future__ import annotations

import re

from ..config.env import (
    ARRAY_BRACKET_CHARS,
    DEFAULT_ARRAY_SEPARATOR,
    DEFAULT_QUOTE_CHARS,
    MUST_GET_QUOTE_CHARS,
    MUST_GET_QUOTE_PASSES,
    UINT32_MAX,
    WHITESPACE_CHARS,
)

_DIGITS_RE = re.compile(r"[0-9]+")


def strip_quote_layers(value: str) -> str:
    """Trim surrounding single/double quote runs a fixed number of times."""
    for _ in range(MUST_GET_QUOTE_PASSES):
        value = value.strip(MUST_GET_QUOTE_CHARS)
    return value


def strip_double_quotes(value: str) -> str:
    return value.strip(DEFAULT_QUOTE_CHARS)


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_bool(value: str) -> bool:
    """Return True only for a case-insensitive ``"true"``."""
    return value.lower() == "true"


def parse_uint32(value: str) -> int:
    """Parse a base-10 unsigned 32-bit integer literal.

    Only ASCII digits are accepted: no sign, no surrounding whitespace and no
    digit separators.

    Raises:
        ValueError: If *value* is not a digit string or exceeds 32 bits.
    """
    if not _DIGITS_RE.fullmatch(value):
        raise ValueError("not an unsigned integer")
    parsed = int(value, 10)
    if parsed > UINT32_MAX:
        raise ValueError("value out of range")
    return parsed


def _strip_brackets(raw: str, sep: str) -> str:
    raw = raw.strip(ARRAY_BRACKET_CHARS).strip(WHITESPACE_CHARS)
    # A trailing separator before the closing bracket leaves an empty tail
    return raw.rstrip(sep).strip(WHITESPACE_CHARS)


def split_array(
    raw: str,
    sep: str = DEFAULT_ARRAY_SEPARATOR,
    allow_quotes: bool = False,
    trim_quoted: bool = False,
) -> list[str]:
    """Tokenize a delimited list value.

    Args:
        raw: The resolved variable value.
        sep: Element separator; empty means ``","``.
        allow_quotes: Keep double quotes around elements when True.
        trim_quoted: Re-trim whitespace after quote stripping. Only used
            when ``allow_quotes`` is False.

    Returns:
        Non-empty elements in textual order. Duplicates are kept.
    """
    raw = raw.strip(WHITESPACE_CHARS)
    if not raw:
        return []

    sep = sep or DEFAULT_ARRAY_SEPARATOR

    if raw[0] == "[" and raw[-1] == "]":
        raw = _strip_brackets(raw, sep)

    parts = [part.strip(WHITESPACE_CHARS) for part in raw.split(sep)]

    if not allow_quotes:
        parts = [strip_double_quotes(part) for part in parts]
        if trim_quoted:
            parts = [part.strip(WHITESPACE_CHARS) for part in parts]

    return [part for part in parts if part]


__all__ = [
    "strip_quote_layers",
    "strip_double_quotes",
    "format_bool",
    "parse_bool",
    "parse_uint32",
    "split_array",
]

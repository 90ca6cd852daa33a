"""UTC clock access and RFC3339-nanosecond conversions.

Time values are ``numpy.datetime64`` in nanosecond units, always UTC. Python's
``datetime`` stops at microseconds, which would lose the last three digits of
an epoch-nanosecond value.

Text is RFC3339 with nanosecond precision. Formatting always writes ``Z``
and drops trailing fractional zeros (``.5`` rather than ``.500000000``).
Parsing accepts any numeric offset and normalizes to UTC; fractional digits
beyond the ninth are truncated.
"""

from __future__ import annotations

import calendar
import logging
import re
import time
from datetime import datetime, timedelta, timezone

import numpy as np

from ..config.timestamp import INT64_MAX, INT64_MIN, NANOS_PER_MILLISECOND, NANOS_PER_SECOND
from ..errors.timestamp import TimestampParseError

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_BASE_FORMAT = "%Y-%m-%dT%H:%M:%S"

_NANOS_PER_UNIT = {
    "W": 7 * 86_400 * NANOS_PER_SECOND,
    "D": 86_400 * NANOS_PER_SECOND,
    "h": 3_600 * NANOS_PER_SECOND,
    "m": 60 * NANOS_PER_SECOND,
    "s": NANOS_PER_SECOND,
    "ms": NANOS_PER_MILLISECOND,
    "us": 1_000,
    "ns": 1,
}
_UNITS_PER_NANO = {"ps": 10**3, "fs": 10**6, "as": 10**9}

_INT64_TEXT_RE = re.compile(r"[+-]?[0-9]+")
_RFC3339_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.(?P<frac>[0-9]+))?"
    r"(?P<offset>Z|[+-][0-9]{2}:[0-9]{2})"
)


def _truncating_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero (``//`` floors negatives)."""
    quotient = abs(value) // divisor
    return quotient if value >= 0 else -quotient


def _datetime64_nanoseconds(value: np.datetime64) -> int:
    """Count nanoseconds in Python ints so coarse units cannot wrap."""
    unit, step = np.datetime_data(value.dtype)
    if unit in ("Y", "M"):
        value = value.astype("datetime64[D]")
        unit, step = "D", 1
    count = int(value.astype(np.int64)) * step
    if unit in _NANOS_PER_UNIT:
        return count * _NANOS_PER_UNIT[unit]
    if unit in _UNITS_PER_NANO:
        return count // _UNITS_PER_NANO[unit]
    raise ValueError(f"unsupported datetime64 unit {unit!r}")


def _to_nanoseconds(value: np.datetime64 | datetime) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        delta = value - _EPOCH
        nanoseconds = (delta.days * 86_400 + delta.seconds) * NANOS_PER_SECOND + delta.microseconds * 1_000
    else:
        if np.isnat(value):
            raise ValueError("cannot format NaT as a timestamp")
        nanoseconds = _datetime64_nanoseconds(value)
    # INT64_MIN is NaT in nanosecond units and cannot be parsed back
    if not INT64_MIN < nanoseconds <= INT64_MAX:
        raise ValueError(f"{value!r} is outside the nanosecond time range")
    return nanoseconds


def _format_nanoseconds(nanoseconds: int) -> str:
    seconds, remainder = divmod(nanoseconds, NANOS_PER_SECOND)
    moment = _EPOCH + timedelta(seconds=seconds)
    # %Y is not zero-padded on every platform
    text = f"{moment.year:04d}-{moment:%m-%dT%H:%M:%S}"
    fraction = f"{remainder:09d}".rstrip("0")
    if fraction:
        text = f"{text}.{fraction}"
    return f"{text}Z"


def _offset_seconds(offset: str) -> int:
    if offset == "Z":
        return 0
    hours, minutes = int(offset[1:3]), int(offset[4:6])
    if hours > 23 or minutes > 59:
        raise ValueError("offset out of range")
    total = hours * 3600 + minutes * 60
    return -total if offset[0] == "-" else total


def now() -> np.datetime64:
    """Return the current instant in UTC."""
    return np.datetime64(time.time_ns(), "ns")


def nanoseconds_since_epoch() -> int:
    return time.time_ns()


def milliseconds_since_epoch() -> int:
    return _truncating_div(nanoseconds_since_epoch(), NANOS_PER_MILLISECOND)


def seconds_since_epoch() -> int:
    # Separate clock read; may differ from milliseconds_since_epoch() // 1000
    return time.time_ns() // NANOS_PER_SECOND


def milliseconds_from(nanoseconds: int) -> int:
    """Convert a nanosecond count to milliseconds, truncating toward zero."""
    return _truncating_div(nanoseconds, NANOS_PER_MILLISECOND)


def format_nanosecond_string(text: str) -> str:
    """Format epoch-nanosecond text as an RFC3339-nanosecond UTC timestamp.

    Args:
        text: A base-10 signed 64-bit integer, e.g. ``"1718461800123456789"``.

    Returns:
        The formatted timestamp, or ``""`` if *text* is not a valid integer.
    """
    if not _INT64_TEXT_RE.fullmatch(text):
        logger.debug("format_nanosecond_string: not an integer literal")
        return ""
    value = int(text, 10)
    if not INT64_MIN <= value <= INT64_MAX:
        logger.debug("format_nanosecond_string: value outside int64 range")
        return ""
    return _format_nanoseconds(value)


def to_epoch_text(value: np.datetime64 | datetime) -> str:
    """Format a time value as RFC3339-nanosecond text.

    Accepts ``numpy.datetime64`` (any unit) or ``datetime``; naive datetimes
    are taken as UTC.

    Raises:
        ValueError: If *value* is NaT or outside the range of signed 64-bit
            epoch nanoseconds (1677-09-21 to 2262-04-11).
    """
    return _format_nanoseconds(_to_nanoseconds(value))


def from_epoch_text(text: str) -> np.datetime64:
    """Parse RFC3339-nanosecond text into a UTC nanosecond time value.

    Raises:
        TimestampParseError: If *text* is not a valid RFC3339 timestamp.
    """
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        raise TimestampParseError(text)
    try:
        base = datetime.strptime(match.group("base"), _BASE_FORMAT)
        offset = _offset_seconds(match.group("offset"))
    except ValueError as exc:
        raise TimestampParseError(text, str(exc)) from exc

    # Digits beyond nanosecond precision are truncated
    fraction = int((match.group("frac") or "")[:9].ljust(9, "0"))
    seconds = calendar.timegm(base.timetuple()) - offset
    nanoseconds = seconds * NANOS_PER_SECOND + fraction
    if not INT64_MIN < nanoseconds <= INT64_MAX:
        raise TimestampParseError(text, "outside the nanosecond time range")
    return np.datetime64(nanoseconds, "ns")


__all__ = [
    "now",
    "nanoseconds_since_epoch",
    "milliseconds_since_epoch",
    "seconds_since_epoch",
    "milliseconds_from",
    "format_nanosecond_string",
    "to_epoch_text",
    "from_epoch_text",
]

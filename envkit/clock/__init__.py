"""UTC clock helpers."""

from .timestamp import (
    now,
    nanoseconds_since_epoch,
    milliseconds_since_epoch,
    seconds_since_epoch,
    milliseconds_from,
    format_nanosecond_string,
    to_epoch_text,
    from_epoch_text,
)

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

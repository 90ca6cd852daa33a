"""Clock unit conversion constants."""

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MILLISECOND = 1_000_000

# Epoch-nanosecond text must fit a signed 64-bit integer
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


__all__ = [
    "NANOS_PER_SECOND",
    "NANOS_PER_MILLISECOND",
    "INT64_MIN",
    "INT64_MAX",
]

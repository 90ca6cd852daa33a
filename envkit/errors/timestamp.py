"""Timestamp parsing exception.

Timestamp text may come from untrusted input, so parse failures are an
ordinary ``ValueError`` the caller is expected to handle.
"""


class TimestampParseError(ValueError):
    """Raised when text is not a valid RFC3339-nanosecond timestamp.

    Attributes:
        text: The rejected input.
    """

    def __init__(self, text: str, reason: str = "not an RFC3339 timestamp") -> None:
        super().__init__(f"cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason


__all__ = ["TimestampParseError"]

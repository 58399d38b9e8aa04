class BigIntError(Exception):
    """Base exception for all big-integer adapter errors."""


class BigIntParseError(BigIntError, ValueError):
    """Raised when input cannot be converted into an arbitrary-precision integer."""

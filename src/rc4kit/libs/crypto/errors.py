from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure categories raised by the RC4 core."""

    INVALID_KEY = "INVALID_KEY"
    INVALID_CHUNK_TYPE = "INVALID_CHUNK_TYPE"
    INVALID_SKIP_COUNT = "INVALID_SKIP_COUNT"


class RC4Error(Exception):
    """Base class for all RC4 contract violations.

    Attributes:
        kind: The :class:`ErrorKind` describing the violation.
    """

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


class InvalidKey(RC4Error, ValueError):
    """The key is empty or not a byte sequence."""

    kind = ErrorKind.INVALID_KEY


class InvalidChunkType(RC4Error, TypeError):
    """A value passed for processing cannot be read as a byte sequence."""

    kind = ErrorKind.INVALID_CHUNK_TYPE


class InvalidSkipCount(RC4Error, ValueError):
    """The keystream skip count is negative or not an integer."""

    kind = ErrorKind.INVALID_SKIP_COUNT

"""Exception types raised by bit sources, reference measures and distances.

Each error also derives from the closest built-in exception so callers that
only know about ``OSError``, ``EOFError`` or ``ValueError`` still catch it.
"""

from __future__ import annotations


class PrngEvalError(Exception):
    """Base class for all prngeval errors."""


class SourceUnavailable(PrngEvalError, OSError):
    """The byte channel could not be opened or the command could not run."""


class StreamExhausted(PrngEvalError, EOFError):
    """A bit was requested past the end of the underlying byte channel."""

    def __init__(self, message: str, *, word_index: int = 0) -> None:
        super().__init__(message)
        self.word_index: int = word_index


class PartitionMismatch(PrngEvalError, ValueError):
    """Two measures were compared over different partitions."""


class InvalidDomainParameter(PrngEvalError, ValueError):
    """A generator parameter lies outside the domain of its formula."""


__all__ = [
    "PrngEvalError",
    "SourceUnavailable",
    "StreamExhausted",
    "PartitionMismatch",
    "InvalidDomainParameter",
]

"""Exceptions raised by the alignment classifier."""
from __future__ import annotations

__all__ = [
    "AlignmentError",
    "InvalidInputKind",
    "PatternCompilationError",
]


class AlignmentError(Exception):
    """Base class for errors raised while classifying column alignment."""


class InvalidInputKind(AlignmentError, TypeError):
    """Raised when the dataset is not a rectangular table of columns."""


class PatternCompilationError(AlignmentError, ValueError):
    """Raised when a numeric-detection pattern cannot be compiled."""

    def __init__(self, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid numeric pattern {pattern!r}: {reason}")
        self.pattern = pattern
        self.reason = reason

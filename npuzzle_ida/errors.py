from __future__ import annotations
from typing import Optional


class PuzzleError(Exception):
    """Base class for every error raised by the package."""


class ParseError(PuzzleError, ValueError):
    """Malformed puzzle input (ragged rows, bad tokens, not a permutation)."""

    def __init__(self, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)


class InvariantViolation(PuzzleError, RuntimeError):
    """A corrupted grid or an impossible move request. Never recovered from."""

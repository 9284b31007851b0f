"""
Exception hierarchy for numeric routines.

Only expected, recoverable failures live here. Violated preconditions are
programmer errors and surface as ``AssertionError`` instead.
"""

from __future__ import annotations

from enum import Enum


class NumericErrorKind(str, Enum):
    LIMIT = "limit"  # Iteration limit reached before convergence


class NumericError(Exception):
    """Base exception for all numeric routine errors."""

    kind: NumericErrorKind

    def __init__(self, kind: NumericErrorKind, message: str) -> None:
        self.kind = kind
        super().__init__(message)


class LimitExceededError(NumericError):
    """Raised when an iterative search does not converge within its iteration budget."""

    def __init__(self, max_iterations: int, x_tolerance: float, width: float) -> None:
        self.max_iterations = max_iterations
        self.x_tolerance = x_tolerance
        self.width = width
        super().__init__(
            NumericErrorKind.LIMIT,
            f"No convergence after {max_iterations} iterations: bracket width {width:.3e} > tolerance {x_tolerance:.3e}",
        )

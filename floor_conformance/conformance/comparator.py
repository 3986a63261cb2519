"""
Epsilon-scaled comparison of floor() results.

A result passes when it equals the expected value exactly (this covers
infinities and signed zero, since -0.0 == 0.0) or when its absolute distance
from the expected value is within the tolerance. A NaN distance never passes.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.exceptions import ToleranceExceeded
from .backends import FloorFunction, numpy_floor


@dataclass(frozen=True)
class ComparisonOutcome:
    """Result of one floor() check."""

    passed: bool
    value: float
    actual: float
    expected: float
    tolerance: Optional[float] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, value: float, actual: float, expected: float,
                tolerance: Optional[float] = None) -> "ComparisonOutcome":
        return cls(True, value, actual, expected, tolerance)

    @classmethod
    def failure(cls, value: float, actual: float, expected: float,
                tolerance: Optional[float] = None,
                error: Optional[str] = None) -> "ComparisonOutcome":
        return cls(False, value, actual, expected, tolerance, error)

    @property
    def message(self) -> str:
        """Single-line diagnostic naming input, actual and expected results."""
        outcome = f"raised {self.error}" if self.error else f"returned {self.actual:20.17g}"
        return f"floor({self.value:g}) {outcome} when it should have returned {self.expected:20.17g}"

    def raise_for_failure(self) -> None:
        """Raise ToleranceExceeded if this outcome failed."""
        if not self.passed:
            raise ToleranceExceeded(
                value=self.value,
                actual=self.actual,
                expected=self.expected,
                tolerance=self.tolerance,
                error=self.error,
            )


def _call(floor_fn: FloorFunction, value: float) -> Tuple[float, Optional[str]]:
    """Evaluate ``floor_fn(value)``; a raised arithmetic error becomes NaN plus its text."""
    try:
        return floor_fn(value), None
    except (ArithmeticError, ValueError, TypeError) as e:
        return math.nan, f"{type(e).__name__}: {e}"


def validate(value: float, expected: float, tolerance: float,
             floor_fn: FloorFunction = numpy_floor) -> ComparisonOutcome:
    """
    Check ``floor_fn(value)`` against ``expected``.

    Args:
        value: Input passed to the function under test
        expected: Correct floor of ``value``
        tolerance: Maximum allowed absolute deviation
        floor_fn: Function under test

    Returns:
        ComparisonOutcome; passed iff |result - expected| <= tolerance.
        An exception raised by ``floor_fn`` is a failed outcome.
    """
    result, error = _call(floor_fn, value)
    if error:
        return ComparisonOutcome.failure(value, result, expected, tolerance, error)

    if result == expected:
        return ComparisonOutcome.success(value, result, expected, tolerance)

    delta = abs(result - expected)
    if delta <= tolerance:
        return ComparisonOutcome.success(value, result, expected, tolerance)

    return ComparisonOutcome.failure(value, result, expected, tolerance)


def validate_isnan(value: float, floor_fn: FloorFunction = numpy_floor) -> ComparisonOutcome:
    """Check that ``floor_fn(value)`` is NaN."""
    result, error = _call(floor_fn, value)
    if error:
        return ComparisonOutcome.failure(value, result, math.nan, error=error)

    if math.isnan(result):
        return ComparisonOutcome.success(value, result, math.nan)

    return ComparisonOutcome.failure(value, result, math.nan)

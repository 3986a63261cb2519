"""
Validation utilities for floor-conformance.

Provides common argument checks for vectors and runner inputs.
"""

import math
from typing import Any, Callable
from ..core.exceptions import ValidationError


def validate_tolerance(value: float, name: str = "tolerance") -> None:
    """
    Validate that a tolerance is a non-negative, non-NaN number.

    Args:
        value: Tolerance to validate
        name: Name for error messages

    Raises:
        ValidationError: If validation fails
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(
            f"{name} must be a real number, got {type(value).__name__}",
            suggestions=["Use BASE_EPSILON scaled by the magnitude of the expected result"],
        )

    if math.isnan(value) or value < 0:
        raise ValidationError(
            f"{name} must be non-negative, got {value}",
            suggestions=[
                "Provide a non-negative tolerance",
                "Use 0 for exact comparisons such as infinities",
            ],
            context={"name": name, "value": value},
        )


def validate_floor_function(floor_fn: Any, name: str = "floor_fn") -> Callable[[float], float]:
    """
    Validate that the function under test is callable.

    Raises:
        ValidationError: If validation fails
    """
    if not callable(floor_fn):
        raise ValidationError(
            f"{name} must be callable, got {type(floor_fn).__name__}",
            suggestions=[
                "Pass a function taking one float and returning a float",
                "Use get_floor_function() to resolve a named backend",
            ],
        )
    return floor_fn

"""Vector table, comparator and runners for floor() conformance."""

from .vectors import (
    BASE_EPSILON,
    MACHINE_EPSILON,
    FLOOR_VECTORS,
    NAN_BIT_PATTERNS,
    TestVector,
    nan_values,
    scaled_tolerance,
)
from .backends import get_floor_function, list_backends, numpy_floor, jax_floor
from .comparator import ComparisonOutcome, validate, validate_isnan
from .symmetry import create_case_table, iter_cases, mirror, run_symmetry
from .special_values import SPECIAL_CASES, run_special_value_checks

__all__ = [
    "BASE_EPSILON",
    "MACHINE_EPSILON",
    "FLOOR_VECTORS",
    "NAN_BIT_PATTERNS",
    "SPECIAL_CASES",
    "TestVector",
    "ComparisonOutcome",
    "nan_values",
    "scaled_tolerance",
    "get_floor_function",
    "list_backends",
    "numpy_floor",
    "jax_floor",
    "validate",
    "validate_isnan",
    "create_case_table",
    "iter_cases",
    "mirror",
    "run_symmetry",
    "run_special_value_checks",
]

"""
Forward-only floor() checks for signed zero, +/-1, infinities and NaN.

These inputs are fixed points of floor (or propagate unchanged), so the
mirror law used for the vector table does not apply to them.
"""

from typing import Optional, Tuple

from .backends import FloorFunction, numpy_floor
from .comparator import ComparisonOutcome, validate_isnan
from .symmetry import first_failure
from .vectors import (
    BASE_EPSILON,
    NEGATIVE_INFINITY,
    POSITIVE_INFINITY,
    TestVector,
    nan_values,
)
from ..utils.logging import get_logger
from ..utils.validation import validate_floor_function

logger = get_logger(__name__)

SPECIAL_CASES: Tuple[TestVector, ...] = (
    TestVector(0.0,                0,                  BASE_EPSILON,       "0"),
    TestVector(-0.0,               0,                  BASE_EPSILON,       "-0"),
    TestVector(1.0,                1,                  BASE_EPSILON * 10,  "1"),
    TestVector(-1.0,               -1,                 BASE_EPSILON * 10,  "-1"),
    TestVector(POSITIVE_INFINITY,  POSITIVE_INFINITY,  0,                  "+infinity"),
    TestVector(NEGATIVE_INFINITY,  NEGATIVE_INFINITY,  0,                  "-infinity"),
)


def run_special_value_checks(floor_fn: FloorFunction = numpy_floor) -> Optional[ComparisonOutcome]:
    """
    Check SPECIAL_CASES, then NaN propagation for every NaN bit pattern.

    Returns:
        The first failing outcome, or None when every check passes
    """
    validate_floor_function(floor_fn)

    failure = first_failure(SPECIAL_CASES, floor_fn)
    if failure is not None:
        return failure

    for value in nan_values():
        outcome = validate_isnan(value, floor_fn)
        if not outcome.passed:
            return outcome

    logger.debug("Special values checked", cases=len(SPECIAL_CASES) + len(nan_values()))
    return None

"""
Table-driven floor() checks with mirrored negative-domain cases.

For a positive non-integer x, floor(-x) = -ceiling(x) = -(floor(x) + 1), so
each authored vector (v, e, t) also yields the case (-v, -(e + 1), t).
The law does not hold for integers, zero or infinities; those vectors are
checked forward only.
"""

from typing import Iterable, Iterator, Optional

import pandas as pd

from .backends import FloorFunction, numpy_floor
from .comparator import ComparisonOutcome, validate
from .vectors import FLOOR_VECTORS, TestVector
from ..utils.logging import get_logger
from ..utils.validation import validate_floor_function

logger = get_logger(__name__)


def mirror(vector: TestVector) -> TestVector:
    """Derive the negative-domain vector for ``vector``."""
    label = f"-({vector.label})" if vector.label else None
    return TestVector(-vector.value, -(vector.expected + 1), vector.tolerance, label)


def iter_cases(vectors: Iterable[TestVector] = FLOOR_VECTORS) -> Iterator[TestVector]:
    """Yield each vector followed by its mirror, in declaration order."""
    for vector in vectors:
        yield vector
        if vector.mirrorable:
            yield mirror(vector)


def first_failure(cases: Iterable[TestVector],
                  floor_fn: FloorFunction = numpy_floor) -> Optional[ComparisonOutcome]:
    """Validate ``cases`` in order and return the first failing outcome, if any."""
    for case in cases:
        outcome = validate(case.value, case.expected, case.tolerance, floor_fn)
        logger.debug("floor case checked", label=case.label, value=case.value,
                     passed=outcome.passed)
        if not outcome.passed:
            return outcome
    return None


def run_symmetry(vectors: Iterable[TestVector] = FLOOR_VECTORS,
                 floor_fn: FloorFunction = numpy_floor) -> Optional[ComparisonOutcome]:
    """
    Run every forward and mirrored case, stopping at the first failure.

    Returns:
        The first failing outcome, or None when every case passes
    """
    validate_floor_function(floor_fn)
    return first_failure(iter_cases(vectors), floor_fn)


def create_case_table(vectors: Iterable[TestVector] = FLOOR_VECTORS) -> pd.DataFrame:
    """Create a table of every forward and mirrored case."""
    data = []
    for vector in vectors:
        data.append({
            'Label': vector.label,
            'Direction': 'forward',
            'Value': vector.value,
            'Expected': vector.expected,
            'Tolerance': vector.tolerance,
        })
        if vector.mirrorable:
            mirrored = mirror(vector)
            data.append({
                'Label': mirrored.label,
                'Direction': 'mirrored',
                'Value': mirrored.value,
                'Expected': mirrored.expected,
                'Tolerance': mirrored.tolerance,
            })

    return pd.DataFrame(data, columns=['Label', 'Direction', 'Value', 'Expected', 'Tolerance'])

"""
Main API functions for floor-conformance.

High-level entry point for checking a floor implementation from Python code
(for example inside another project's test suite).
"""

from typing import Iterable, Optional, Union

from ..config.settings import FloorBackend, get_default_config
from ..conformance.backends import FloorFunction, get_floor_function
from ..conformance.special_values import SPECIAL_CASES, run_special_value_checks
from ..conformance.symmetry import iter_cases, run_symmetry
from ..conformance.vectors import FLOOR_VECTORS, TestVector, nan_values
from ..utils.logging import get_logger

logger = get_logger(__name__)


def check_floor(
    floor_fn: Optional[FloorFunction] = None,
    backend: Optional[Union[str, FloorBackend]] = None,
    vectors: Iterable[TestVector] = FLOOR_VECTORS,
) -> int:
    """
    Check a floor implementation and raise on the first failure.

    Args:
        floor_fn: Function under test; overrides ``backend``
        backend: Named backend (default: the configured backend)
        vectors: Table driving the symmetry runner

    Returns:
        Number of checks performed

    Raises:
        ToleranceExceeded: On the first failing check
        ConfigurationError: If ``backend`` is unknown

    Examples:
        >>> check_floor(backend="numpy")
        37
        >>> check_floor(floor_fn=my_floor)
    """
    if floor_fn is None:
        floor_fn = get_floor_function(backend or get_default_config().harness.backend)

    vectors = tuple(vectors)

    failure = run_special_value_checks(floor_fn)
    if failure is None:
        failure = run_symmetry(vectors, floor_fn)
    if failure is not None:
        failure.raise_for_failure()

    checked = len(SPECIAL_CASES) + len(nan_values()) + sum(1 for _ in iter_cases(vectors))
    logger.info("floor conformance passed", checks=checked)
    return checked

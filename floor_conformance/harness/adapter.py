"""
Glue between the floor() checks and a harness runtime.

Control flow: initialize the runtime, run the special-value checks, run the
symmetry runner over the vector table, terminate. The first failing check
is reported and ends the run.
"""

from enum import IntEnum
from typing import Iterable, Sequence

from ..conformance.backends import FloorFunction
from ..conformance.special_values import run_special_value_checks
from ..conformance.symmetry import run_symmetry
from ..conformance.vectors import FLOOR_VECTORS, TestVector
from .runtime import HarnessRuntime


class ExitStatus(IntEnum):
    """Process exit status reported to the harness."""
    PASS = 0
    FAIL = 1


def run_conformance(
    runtime: HarnessRuntime,
    floor_fn: FloorFunction,
    args: Sequence[str] = (),
    vectors: Iterable[TestVector] = FLOOR_VECTORS,
    teardown_on_failure: bool = True,
) -> ExitStatus:
    """
    Run every floor() check against ``floor_fn`` inside ``runtime``.

    Args:
        runtime: Harness lifecycle hooks
        floor_fn: Function under test
        args: Arguments forwarded to ``runtime.initialize``
        vectors: Table driving the symmetry runner
        teardown_on_failure: Call ``runtime.terminate`` after a failed check

    Returns:
        ExitStatus.PASS if every check passed, else ExitStatus.FAIL
    """
    if runtime.initialize(args) != 0:
        return ExitStatus.FAIL

    failure = run_special_value_checks(floor_fn)
    if failure is None:
        failure = run_symmetry(vectors, floor_fn)

    if failure is not None:
        runtime.report_failure(failure.message)
        if teardown_on_failure:
            runtime.terminate()
        return ExitStatus.FAIL

    runtime.terminate()
    return ExitStatus.PASS

"""
Test vector table for floor().

binary64 has a machine epsilon of 2**-52 (about 2.22e-16), which is too
strict for comparing against libm implementations on every platform.
2**-50 (about 8.88e-16) is used as the base tolerance instead, scaled by the
decimal magnitude of the expected result so the comparison covers the most
significant digits only:

    0.xxxxxxxxxxxxxxxxx   -> BASE_EPSILON
    0.0xxxxxxxxxxxxxxxxx  -> BASE_EPSILON / 10
    x.xxxxxxxxxxxxxxxx    -> BASE_EPSILON * 10

The scale is chosen per vector when the table is authored; it is never
derived at runtime.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..utils.validation import validate_tolerance

MACHINE_EPSILON = 2.0 ** -52
BASE_EPSILON = 8.8817841970012523e-16

POSITIVE_INFINITY = math.inf
NEGATIVE_INFINITY = -math.inf
NAN = math.nan

# Quiet, negative quiet, quiet with payload, signaling.
NAN_BIT_PATTERNS: Tuple[int, ...] = (
    0x7FF8000000000000,
    0xFFF8000000000000,
    0x7FF8000000000001,
    0x7FF0000000000001,
)


def scaled_tolerance(decades: int) -> float:
    """Return BASE_EPSILON scaled by ``10**decades``."""
    return BASE_EPSILON * 10.0 ** decades


def nan_values() -> Tuple[float, ...]:
    """Materialise NAN_BIT_PATTERNS as float64 values."""
    bits = np.array(NAN_BIT_PATTERNS, dtype=np.uint64)
    return tuple(bits.view(np.float64).tolist())


@dataclass(frozen=True)
class TestVector:
    """One conformance case: floor(value) must be within tolerance of expected."""

    __test__ = False  # not a pytest class

    value: float
    expected: float
    tolerance: float
    label: Optional[str] = None

    def __post_init__(self):
        validate_tolerance(self.tolerance)

    @property
    def mirrorable(self) -> bool:
        """Whether floor(-x) = -(floor(x) + 1) holds for this value."""
        return math.isfinite(self.value) and not float(self.value).is_integer()


FLOOR_VECTORS: Tuple[TestVector, ...] = (
    #          value                  expected            tolerance
    TestVector(0.31830988618379067,   0,                  BASE_EPSILON,       "1 / pi"),
    TestVector(0.43429448190325183,   0,                  BASE_EPSILON,       "log10(e)"),
    TestVector(0.63661977236758134,   0,                  BASE_EPSILON,       "2 / pi"),
    TestVector(0.69314718055994531,   0,                  BASE_EPSILON,       "ln(2)"),
    TestVector(0.70710678118654752,   0,                  BASE_EPSILON,       "1 / sqrt(2)"),
    TestVector(0.78539816339744831,   0,                  BASE_EPSILON,       "pi / 4"),
    TestVector(1.1283791670955126,    1,                  BASE_EPSILON * 10,  "2 / sqrt(pi)"),
    TestVector(1.4142135623730950,    1,                  BASE_EPSILON * 10,  "sqrt(2)"),
    TestVector(1.4426950408889634,    1,                  BASE_EPSILON * 10,  "log2(e)"),
    TestVector(1.5707963267948966,    1,                  BASE_EPSILON * 10,  "pi / 2"),
    TestVector(2.3025850929940457,    2,                  BASE_EPSILON * 10,  "ln(10)"),
    TestVector(2.7182818284590452,    2,                  BASE_EPSILON * 10,  "e"),
    TestVector(3.1415926535897932,    3,                  BASE_EPSILON * 10,  "pi"),
    TestVector(POSITIVE_INFINITY,     POSITIVE_INFINITY,  0,                  "+infinity"),
)

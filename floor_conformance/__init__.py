"""
floor-conformance: IEEE-754 conformance oracle for floor()

Validates a floor implementation against a fixed table of double-precision
vectors, their mirrored negative-domain cases, and the special values
(signed zero, infinities, NaN).
"""

__version__ = "1.0.0"

# Configuration
from .config.settings import FloorConformanceConfig, FloorBackend, get_default_config

# Vector table and checks
from .conformance import (
    BASE_EPSILON,
    FLOOR_VECTORS,
    SPECIAL_CASES,
    TestVector,
    ComparisonOutcome,
    get_floor_function,
    list_backends,
    validate,
    validate_isnan,
    run_symmetry,
    run_special_value_checks,
)

# Harness
from .harness import ExitStatus, HarnessRuntime, LoggingRuntime, run_conformance

# API
from .core.api import check_floor

# Exceptions
from .core.exceptions import (
    FloorConformanceError,
    ToleranceExceeded,
    ValidationError,
    ConfigurationError,
    HarnessError,
)

__all__ = [
    "__version__",

    # Configuration
    "FloorConformanceConfig",
    "FloorBackend",
    "get_config",
    "configure",

    # Vector table and checks
    "BASE_EPSILON",
    "FLOOR_VECTORS",
    "SPECIAL_CASES",
    "TestVector",
    "ComparisonOutcome",
    "get_floor_function",
    "list_backends",
    "validate",
    "validate_isnan",
    "run_symmetry",
    "run_special_value_checks",
    "check_floor",

    # Harness
    "ExitStatus",
    "HarnessRuntime",
    "LoggingRuntime",
    "run_conformance",

    # Exceptions
    "FloorConformanceError",
    "ToleranceExceeded",
    "ValidationError",
    "ConfigurationError",
    "HarnessError",
]


def get_config() -> FloorConformanceConfig:
    """Get the global configuration instance."""
    return get_default_config()


def configure(**kwargs) -> None:
    """Update global configuration (dotted keys address section fields)."""
    get_config().update(**kwargs)

"""Core functionality for floor-conformance."""

from .exceptions import (
    FloorConformanceError,
    ToleranceExceeded,
    ValidationError,
    ConfigurationError,
    HarnessError,
)

__all__ = [
    "FloorConformanceError",
    "ToleranceExceeded",
    "ValidationError",
    "ConfigurationError",
    "HarnessError",
]

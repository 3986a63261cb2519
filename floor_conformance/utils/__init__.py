"""Utility functions and classes for floor-conformance."""

from .logging import close_logging, get_logger, setup_logging
from .validation import validate_tolerance, validate_floor_function

__all__ = [
    "close_logging",
    "get_logger",
    "setup_logging",
    "validate_tolerance",
    "validate_floor_function",
]

"""
Tests for check_floor() and the exception hierarchy.
"""

import math

import pytest

import floor_conformance
from floor_conformance import check_floor
from floor_conformance.conformance.backends import numpy_floor
from floor_conformance.conformance.vectors import BASE_EPSILON, TestVector
from floor_conformance.core.exceptions import (
    ConfigurationError,
    FloorConformanceError,
    HarnessError,
    ToleranceExceeded,
    ValidationError,
)

from ..broken_floors import ceiling_floor, drifting_floor, nan_swallowing_floor


class TestCheckFloor:
    """Test check_floor()."""

    def test_default_backend(self):
        assert check_floor() == 37

    def test_named_backend(self):
        assert check_floor(backend="numpy") == 37

    def test_configured_backend(self, monkeypatch):
        calls = []

        def floor_fn(value):
            calls.append(value)
            return math.floor(value) if math.isfinite(value) else value

        monkeypatch.setattr(
            "floor_conformance.core.api.get_floor_function", lambda backend: floor_fn
        )
        check_floor()
        assert len(calls) == 37

    def test_custom_function_and_vectors(self):
        vectors = [TestVector(7.5, 7, BASE_EPSILON * 10)]
        # special cases, NaN patterns, then 7.5 and its mirror
        assert check_floor(floor_fn=numpy_floor, vectors=vectors) == 6 + 4 + 2

    def test_raises_on_table_failure(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            check_floor(floor_fn=ceiling_floor)
        assert exc_info.value.value == 0.31830988618379067
        assert exc_info.value.expected == 0

    def test_raises_on_nan_failure(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            check_floor(floor_fn=nan_swallowing_floor)
        assert math.isnan(exc_info.value.expected)

    def test_raising_floor_becomes_tolerance_exceeded(self):
        with pytest.raises(ToleranceExceeded) as exc_info:
            check_floor(floor_fn=math.floor)
        error = exc_info.value
        assert error.value == math.inf
        assert error.error.startswith("OverflowError")
        assert "floor(inf) raised OverflowError" in str(error)
        assert "error" in error.context

    def test_tolerated_drift(self):
        assert check_floor(floor_fn=drifting_floor(4e-16)) == 37

    def test_unknown_backend(self):
        with pytest.raises(ConfigurationError):
            check_floor(backend="libm")


class TestExceptions:
    """Test exception formatting."""

    def test_hierarchy(self):
        for cls in (ToleranceExceeded, ValidationError, ConfigurationError, HarnessError):
            assert issubclass(cls, FloorConformanceError)

    def test_base_formatting(self):
        error = FloorConformanceError(
            "Something broke",
            suggestions=["First", "Second"],
            error_code="CODE",
        )
        text = str(error)
        assert text.startswith("[CODE] Something broke")
        assert "  1. First" in text
        assert "  2. Second" in text

    def test_tolerance_exceeded_context(self):
        error = ToleranceExceeded(value=-2.5, actual=-2.0, expected=-3, tolerance=0.0)
        assert error.context == {
            "value": -2.5, "actual": -2.0, "expected": -3, "tolerance": 0.0,
        }
        assert "floor(-2.5) returned" in str(error)

    def test_harness_error_message(self):
        error = HarnessError(status=1, cause="permission denied")
        assert "status 1" in str(error)
        assert "permission denied" in str(error)

    def test_exported_from_package(self):
        assert floor_conformance.ToleranceExceeded is ToleranceExceeded

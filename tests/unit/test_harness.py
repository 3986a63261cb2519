"""
Tests for the harness adapter and logging runtime.
"""

import math

from floor_conformance.config.settings import FloorConformanceConfig
from floor_conformance.conformance.backends import numpy_floor
from floor_conformance.harness.adapter import ExitStatus, run_conformance
from floor_conformance.harness.runtime import LoggingRuntime
from floor_conformance.utils import logging as fc_logging

from ..broken_floors import (
    RecordingRuntime,
    ceiling_floor,
    nan_swallowing_floor,
    truncating_floor,
)


class TestRunConformance:
    """Test run_conformance() control flow."""

    def test_pass(self, recording_runtime):
        status = run_conformance(recording_runtime, numpy_floor, args=["--quick"])
        assert status == ExitStatus.PASS
        assert status == 0
        assert recording_runtime.calls == ["initialize", "terminate"]
        assert recording_runtime.args == ("--quick",)

    def test_initialize_failure_runs_nothing(self):
        runtime = RecordingRuntime(init_status=3)
        seen = []

        def floor_fn(value):
            seen.append(value)
            return numpy_floor(value)

        status = run_conformance(runtime, floor_fn)
        assert status == ExitStatus.FAIL
        assert runtime.calls == ["initialize"]
        assert seen == []

    def test_failure_reported_once_and_torn_down(self, recording_runtime):
        status = run_conformance(recording_runtime, truncating_floor)
        assert status == ExitStatus.FAIL
        assert recording_runtime.calls == ["initialize", "report_failure", "terminate"]
        assert len(recording_runtime.failures) == 1
        assert recording_runtime.failures[0].startswith("floor(-0.31831) returned")

    def test_failure_without_teardown(self, recording_runtime):
        status = run_conformance(recording_runtime, ceiling_floor, teardown_on_failure=False)
        assert status == ExitStatus.FAIL
        assert recording_runtime.calls == ["initialize", "report_failure"]

    def test_special_values_run_before_table(self, recording_runtime):
        seen = []

        def floor_fn(value):
            seen.append(value)
            return nan_swallowing_floor(value)

        run_conformance(recording_runtime, floor_fn)
        # Six special cases, then the first NaN pattern fails
        assert len(seen) == 7
        assert "nan" in recording_runtime.failures[0]

    def test_custom_vectors(self, recording_runtime):
        assert run_conformance(recording_runtime, numpy_floor, vectors=()) == ExitStatus.PASS

    def test_raising_floor_reported_and_torn_down(self, recording_runtime):
        # math.floor raises OverflowError on infinity
        status = run_conformance(recording_runtime, math.floor)
        assert status == ExitStatus.FAIL
        assert recording_runtime.calls == ["initialize", "report_failure", "terminate"]
        assert recording_runtime.failures[0].startswith("floor(inf) raised OverflowError")


class TestLoggingRuntime:
    """Test LoggingRuntime hooks."""

    def test_lifecycle(self):
        runtime = LoggingRuntime(FloorConformanceConfig(logging={"console_logging": False}))
        assert runtime.initialize(["run"]) == 0
        assert runtime.initialized

        runtime.report_failure("floor(1) returned 0 when it should have returned 1")
        assert runtime.failures == ["floor(1) returned 0 when it should have returned 1"]

        runtime.terminate()
        assert runtime.terminated

    def test_failure_written_to_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "conformance.log"
        config = FloorConformanceConfig(
            logging={"console_logging": False, "file_logging": True, "log_file": log_file}
        )
        runtime = LoggingRuntime(config)

        status = run_conformance(runtime, ceiling_floor)

        assert status == ExitStatus.FAIL
        contents = log_file.read_text()
        assert "Conformance run started" in contents
        assert "floor(0.31831) returned" in contents
        assert "Conformance run finished" in contents

    def test_terminate_closes_log_files(self, tmp_path):
        log_file = tmp_path / "conformance.log"
        config = FloorConformanceConfig(
            logging={"console_logging": False, "file_logging": True, "log_file": log_file}
        )
        runtime = LoggingRuntime(config)
        runtime.initialize([])
        handlers = list(fc_logging.get_logger("floor_conformance.harness").logger.handlers)
        assert handlers

        runtime.terminate()

        assert fc_logging.get_logger("floor_conformance.harness").logger.handlers == []
        for handler in handlers:
            assert handler.stream is None

    def test_unwritable_log_file_fails_initialize(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        config = FloorConformanceConfig(logging={"console_logging": False})
        config.logging.file_logging = True
        config.logging.log_file = blocker / "conformance.log"

        runtime = LoggingRuntime(config)
        assert runtime.initialize([]) == 1
        assert not runtime.initialized
        assert isinstance(runtime.init_error, OSError)

"""Harness lifecycle integration for floor-conformance."""

from .adapter import ExitStatus, run_conformance
from .runtime import HarnessRuntime, LoggingRuntime

__all__ = ["ExitStatus", "run_conformance", "HarnessRuntime", "LoggingRuntime"]

"""
Shared pytest configuration and fixtures for floor-conformance tests.
"""

import pytest

from floor_conformance.config import reset_default_config
from floor_conformance.utils import logging as fc_logging

from .broken_floors import RecordingRuntime


ENV_VARS = [
    "FLOOR_CONFORMANCE_LOG_LEVEL",
    "FLOOR_CONFORMANCE_LOG_FILE",
    "FLOOR_CONFORMANCE_BACKEND",
    "FLOOR_CONFORMANCE_TEARDOWN_ON_FAILURE",
]


def _reset_loggers():
    for logger in fc_logging._loggers.values():
        logger._configured = False


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch):
    """Give every test a fresh default configuration and logger setup."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_default_config()
    _reset_loggers()
    yield
    reset_default_config()
    _reset_loggers()


@pytest.fixture
def recording_runtime():
    return RecordingRuntime()

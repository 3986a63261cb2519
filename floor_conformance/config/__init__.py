"""Configuration management for floor-conformance."""

from .settings import (
    FloorConformanceConfig,
    LoggingConfig,
    HarnessConfig,
    FloorBackend,
    LogLevel,
    get_default_config,
    reset_default_config,
)

__all__ = [
    "FloorConformanceConfig",
    "LoggingConfig",
    "HarnessConfig",
    "FloorBackend",
    "LogLevel",
    "get_default_config",
    "reset_default_config",
]

"""
Configuration management system for floor-conformance.

Provides a small hierarchical configuration with support for YAML
configuration files, environment variables, and runtime updates.
"""

import os
import yaml
from pathlib import Path
from typing import Dict, Any, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class LogLevel(str, Enum):
    """Logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class FloorBackend(str, Enum):
    """Floor implementations the oracle can be pointed at."""
    NUMPY = "numpy"
    JAX = "jax"


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(validate_assignment=True)

    level: LogLevel = LogLevel.INFO
    file_logging: bool = False
    log_file: Optional[Path] = None
    console_logging: bool = True
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator('level', mode='before')
    @classmethod
    def validate_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class HarnessConfig(BaseModel):
    """Harness lifecycle configuration."""
    model_config = ConfigDict(validate_assignment=True)

    backend: FloorBackend = FloorBackend.NUMPY
    teardown_on_failure: bool = True

    @field_validator('backend', mode='before')
    @classmethod
    def validate_backend(cls, v):
        return v.lower() if isinstance(v, str) else v


class FloorConformanceConfig(BaseModel):
    """Main configuration class for floor-conformance."""

    model_config = ConfigDict(validate_assignment=True)

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    harness: HarnessConfig = Field(default_factory=HarnessConfig)

    def __init__(self, config_file: Optional[Union[str, Path]] = None, **kwargs):
        """
        Initialize configuration.

        Args:
            config_file: Path to YAML configuration file
            **kwargs: Override specific configuration values
        """
        config_data = {}
        if config_file:
            config_data = self._load_config_file(config_file)

        _merge_sections(config_data, self._load_environment_variables())
        _merge_sections(config_data, kwargs)

        super().__init__(**config_data)

        if self.logging.file_logging and self.logging.log_file:
            self.logging.log_file.parent.mkdir(parents=True, exist_ok=True)

    @staticmethod
    def _load_config_file(config_file: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from YAML file."""
        config_path = Path(config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def _load_environment_variables() -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config = {}

        env_mappings = {
            'FLOOR_CONFORMANCE_LOG_LEVEL': ('logging', 'level'),
            'FLOOR_CONFORMANCE_LOG_FILE': ('logging', 'log_file'),
            'FLOOR_CONFORMANCE_BACKEND': ('harness', 'backend'),
            'FLOOR_CONFORMANCE_TEARDOWN_ON_FAILURE': ('harness', 'teardown_on_failure'),
        }

        for env_var, (section, key) in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                if section not in config:
                    config[section] = {}

                if key == 'teardown_on_failure':
                    value = value.lower() in ('true', '1', 'yes', 'on')
                elif key == 'log_file':
                    config[section]['file_logging'] = True

                config[section][key] = value

        return config

    def save_config(self, config_file: Union[str, Path]) -> None:
        """Save current configuration to YAML file."""
        config_path = Path(config_file)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w') as f:
            yaml.safe_dump(self.model_dump(mode='json'), f, default_flow_style=False, indent=2)

    def update(self, **kwargs) -> None:
        """
        Update configuration values.

        Dotted keys address a section field, e.g. ``harness.backend="jax"``.
        """
        for key, value in kwargs.items():
            if '.' in key:
                section, subkey = key.split('.', 1)
                section_obj = getattr(self, section, None)
                if section_obj is not None and subkey in type(section_obj).model_fields:
                    setattr(section_obj, subkey, value)
            elif key in type(self).model_fields:
                setattr(self, key, value)


def _merge_sections(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    """Merge section dictionaries one level deep."""
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            target[key].update(value)
        else:
            target[key] = value


# Default configuration instance
_default_config: Optional[FloorConformanceConfig] = None


def get_default_config() -> FloorConformanceConfig:
    """Get the default configuration instance."""
    global _default_config
    if _default_config is None:
        _default_config = FloorConformanceConfig()
    return _default_config


def reset_default_config() -> None:
    """Drop the default configuration so the next access rebuilds it."""
    global _default_config
    _default_config = None

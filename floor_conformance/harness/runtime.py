"""
Lifecycle hooks between the conformance checks and the process that hosts them.
"""

import time
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from ..config.settings import FloorConformanceConfig, get_default_config
from ..utils.logging import close_logging, get_logger, setup_logging

logger = get_logger("floor_conformance.harness")


class HarnessRuntime(ABC):
    """Hooks a conformance run calls into."""

    @abstractmethod
    def initialize(self, args: Sequence[str]) -> int:
        """Bring the runtime up; return 0 on success."""

    @abstractmethod
    def report_failure(self, message: str) -> None:
        """Report a single failing check."""

    @abstractmethod
    def terminate(self) -> None:
        """Tear the runtime down."""


class LoggingRuntime(HarnessRuntime):
    """Runtime that reports through the package logger."""

    def __init__(self, config: Optional[FloorConformanceConfig] = None):
        self.config = config or get_default_config()
        self.failures: List[str] = []
        self.initialized = False
        self.terminated = False
        self.init_error: Optional[OSError] = None
        self._start_time: Optional[float] = None

    def initialize(self, args: Sequence[str]) -> int:
        # Package loggers read the default config.
        default_config = get_default_config()
        if default_config is not self.config:
            default_config.logging = self.config.logging.model_copy()
        setup_logging(level=self.config.logging.level)

        try:
            logger.info("Conformance run started", backend=self.config.harness.backend.value,
                        args=" ".join(args) or "-")
        except OSError as e:
            # Log file could not be opened.
            self.init_error = e
            return 1

        self._start_time = time.perf_counter()
        self.initialized = True
        return 0

    def report_failure(self, message: str) -> None:
        self.failures.append(message)
        logger.error(message)

    def terminate(self) -> None:
        duration = time.perf_counter() - self._start_time if self._start_time else 0.0
        self.terminated = True
        logger.info("Conformance run finished", failures=len(self.failures),
                    duration_seconds=f"{duration:.4f}")
        close_logging()

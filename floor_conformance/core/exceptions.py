"""
Exception classes for floor-conformance.

Provides rich error information with actionable suggestions.
"""

from typing import List, Optional, Dict, Any


class FloorConformanceError(Exception):
    """
    Base exception class for floor-conformance with rich error information.

    Provides structured error information including suggestions for resolution
    and links to relevant documentation.
    """

    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        documentation_link: Optional[str] = None,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        self.suggestions = suggestions or []
        self.documentation_link = documentation_link
        self.error_code = error_code
        self.context = context or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error message with suggestions."""
        message = super().__str__()

        if self.error_code:
            message = f"[{self.error_code}] {message}"

        if self.suggestions:
            message += "\n\nSuggestions:"
            for i, suggestion in enumerate(self.suggestions, 1):
                message += f"\n  {i}. {suggestion}"

        if self.documentation_link:
            message += f"\n\nDocumentation: {self.documentation_link}"

        return message


class ToleranceExceeded(FloorConformanceError):
    """
    Raised when floor() deviates from the expected result by more than
    the allowed tolerance, including a NaN that was expected but not observed.
    """

    def __init__(
        self,
        value: float,
        actual: float,
        expected: float,
        tolerance: Optional[float] = None,
        error: Optional[str] = None,
        **kwargs
    ):
        self.value = value
        self.actual = actual
        self.expected = expected
        self.tolerance = tolerance
        self.error = error

        outcome = f"raised {error}" if error else f"returned {actual:20.17g}"
        message = f"floor({value:g}) {outcome} when it should have returned {expected:20.17g}"

        context = {
            "value": value,
            "actual": actual,
            "expected": expected,
            "tolerance": tolerance,
        }
        if error:
            context["error"] = error

        kwargs.pop('suggestions', None)

        super().__init__(
            message=message,
            suggestions=[
                "Check the platform libm or array library floor implementation",
                "Confirm the input is passed as an IEEE-754 double",
                "Inspect rounding-mode changes made by other native code",
            ],
            error_code="TOLERANCE_EXCEEDED",
            context=context,
            **kwargs
        )


class ValidationError(FloorConformanceError):
    """Exception raised for invalid arguments or table entries."""

    def __init__(self, message: str = "Validation checks failed", **kwargs):
        kwargs.setdefault('error_code', "VALIDATION")
        super().__init__(message=message, **kwargs)


class ConfigurationError(FloorConformanceError):
    """Exception raised for configuration issues."""

    def __init__(
        self,
        config_key: Optional[str] = None,
        value: Any = None,
        choices: Optional[List[str]] = None,
        **kwargs
    ):
        if config_key:
            message = f"Invalid configuration for '{config_key}'"
            if value is not None:
                message += f": {value!r}"
            suggestions = [
                f"Check the value for configuration key '{config_key}'",
                "Review configuration file syntax",
                "Check environment variable formatting",
            ]
            if choices:
                suggestions.insert(0, f"Choose one of: {', '.join(choices)}")
        else:
            message = "Configuration error"
            suggestions = [
                "Check configuration file syntax",
                "Review configuration documentation",
            ]

        kwargs.pop('suggestions', None)

        super().__init__(
            message=message,
            suggestions=suggestions,
            error_code="CONFIG",
            context={"config_key": config_key, "value": value, "choices": choices},
            **kwargs
        )


class HarnessError(FloorConformanceError):
    """Exception raised when the harness runtime cannot be brought up."""

    def __init__(self, status: Optional[int] = None, cause: Optional[str] = None, **kwargs):
        message = "Harness runtime failed to initialize"
        if status is not None:
            message += f" (status {status})"
        if cause:
            message += f": {cause}"

        kwargs.pop('suggestions', None)

        super().__init__(
            message=message,
            suggestions=[
                "Check the runtime arguments",
                "Verify the log file location is writable",
            ],
            error_code="HARNESS",
            context={"status": status, "cause": cause},
            **kwargs
        )

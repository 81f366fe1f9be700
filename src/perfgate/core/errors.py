"""
Error Handling Framework for perfgate

This module provides the exception hierarchy for the package:
- PerfGateError: Base exception for all perfgate errors
- ValidationError: Configuration and sample-set validation errors
- BaselineError: Baseline storage errors

Numerical edge cases (zero mean, zero baseline, singleton sample sets) are
not errors; they resolve to documented fallback values at the call site.
"""

from typing import Any


# =============================================================================
# Base Exception
# =============================================================================

class PerfGateError(Exception):
    """
    Base exception for all perfgate errors.

    Supports structured error details so callers can print a diagnostic
    naming the metric, the side and the offending value.
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None
    ):
        """
        Initialize perfgate error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional context
            cause: Optional underlying exception
        """
        self.message = message
        self.details = details or {}
        self.cause = cause
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"({details_str})")
        if self.cause:
            parts.append(f"[caused by: {type(self.cause).__name__}: {self.cause}]")
        return " ".join(parts)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, details={self.details!r})"

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
            "cause": str(self.cause) if self.cause else None
        }


# =============================================================================
# Validation Errors
# =============================================================================

class ValidationError(PerfGateError):
    """Base exception for validation failures."""
    pass


class ConfigValidationError(ValidationError):
    """Raised when configuration validation fails."""

    def __init__(
        self,
        config_name: str,
        parameter: str,
        value: Any,
        reason: str
    ):
        message = f"Invalid {config_name} configuration: '{parameter}' = {value!r} - {reason}"
        super().__init__(message, {
            "config": config_name,
            "parameter": parameter,
            "value": value,
            "reason": reason
        })


class SampleSetError(ValidationError):
    """Base exception for unusable sample sets."""
    pass


class EmptySampleSetError(SampleSetError):
    """Raised when statistics are requested for a sample set with no samples."""

    def __init__(self, label: str = "samples"):
        message = f"Cannot calculate statistics for '{label}': sample set is empty"
        super().__init__(message, {"label": label, "count": 0})


class NonFiniteSampleError(SampleSetError):
    """Raised when a sample set contains NaN or infinite values."""

    def __init__(self, label: str, index: int, value: float):
        message = f"Sample {index} of '{label}' is not a finite number: {value!r}"
        super().__init__(message, {
            "label": label,
            "index": index,
            "value": value
        })


# =============================================================================
# Baseline Errors
# =============================================================================

class BaselineError(PerfGateError):
    """Base exception for baseline storage failures."""
    pass


class BaselineNotFoundError(BaselineError):
    """Raised when no baseline exists for the requested key."""

    def __init__(self, key: str, location: str | None = None):
        message = f"No baseline found for '{key}'"
        if location:
            message = f"{message} in {location}"
        super().__init__(message, {
            "key": key,
            "location": location
        })


class BaselineStorageError(BaselineError):
    """Raised when a baseline cannot be read or written."""

    def __init__(
        self,
        key: str,
        operation: str,
        reason: str,
        cause: Exception | None = None
    ):
        message = f"Baseline '{key}' {operation} failed: {reason}"
        super().__init__(message, {
            "key": key,
            "operation": operation,
            "reason": reason
        }, cause=cause)


# =============================================================================
# Utility Functions
# =============================================================================

def format_error_chain(exc: Exception, max_depth: int = 5) -> str:
    """
    Format an exception chain for logging.

    Args:
        exc: The exception to format
        max_depth: Maximum depth of cause chain to include

    Returns:
        Formatted error string with cause chain
    """
    parts = [f"{type(exc).__name__}: {exc}"]
    current = exc
    depth = 0

    while getattr(current, 'cause', None) and depth < max_depth:
        current = current.cause
        parts.append(f"  Caused by: {type(current).__name__}: {current}")
        depth += 1

    if exc.__cause__ is not None and exc.__cause__ is not getattr(exc, 'cause', None) and depth < max_depth:
        parts.append(f"  Python cause: {type(exc.__cause__).__name__}: {exc.__cause__}")

    return "\n".join(parts)


__all__ = [
    # Base
    'PerfGateError',
    # Validation
    'ValidationError',
    'ConfigValidationError',
    'SampleSetError',
    'EmptySampleSetError',
    'NonFiniteSampleError',
    # Baselines
    'BaselineError',
    'BaselineNotFoundError',
    'BaselineStorageError',
    # Utilities
    'format_error_chain',
]

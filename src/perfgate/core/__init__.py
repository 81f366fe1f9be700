"""Core configuration and error types."""

from .config import (
    ComparisonConfig,
    CriticalValueMethod,
    configure,
    get_config,
    set_config,
    validate_significance_level,
)
from .errors import (
    BaselineError,
    BaselineNotFoundError,
    BaselineStorageError,
    ConfigValidationError,
    EmptySampleSetError,
    NonFiniteSampleError,
    PerfGateError,
    SampleSetError,
    ValidationError,
    format_error_chain,
)

__all__ = [
    "ComparisonConfig",
    "CriticalValueMethod",
    "configure",
    "get_config",
    "set_config",
    "validate_significance_level",
    "PerfGateError",
    "ValidationError",
    "ConfigValidationError",
    "SampleSetError",
    "EmptySampleSetError",
    "NonFiniteSampleError",
    "BaselineError",
    "BaselineNotFoundError",
    "BaselineStorageError",
    "format_error_chain",
]

"""
Configuration System for perfgate

The significance level is the only tunable parameter of the statistical
decision; the remaining knobs select how critical values are obtained and
how many samples the regression detector accepts.
"""

import os
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any

from .errors import ConfigValidationError


class CriticalValueMethod(Enum):
    """How Student's-t critical values are obtained."""
    TABLE = "table"    # Bucketed lookup (df >= 30, >= 10, >= 5, else)
    EXACT = "exact"    # Inverse t-CDF via scipy


DEFAULT_SIGNIFICANCE_LEVEL = 0.05
DEFAULT_CONFIDENCE_LEVEL = 0.95


def validate_significance_level(value: float, parameter: str = "significance_level") -> float:
    """Return ``value`` as a float, raising if it is not strictly inside (0, 1)."""
    try:
        alpha = float(value)
    except (TypeError, ValueError):
        raise ConfigValidationError("comparison", parameter, value, "must be a number") from None
    if not 0.0 < alpha < 1.0:
        raise ConfigValidationError("comparison", parameter, value, "must lie strictly between 0 and 1")
    return alpha


def coerce_method(value: "CriticalValueMethod | str") -> CriticalValueMethod:
    """Accept either the enum or its string value."""
    if isinstance(value, CriticalValueMethod):
        return value
    try:
        return CriticalValueMethod(str(value).lower())
    except ValueError:
        choices = ", ".join(m.value for m in CriticalValueMethod)
        raise ConfigValidationError(
            "comparison", "critical_value_method", value, f"expected one of: {choices}"
        ) from None


@dataclass
class ComparisonConfig:
    """Settings for statistical comparison of sample sets."""
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL
    critical_value_method: CriticalValueMethod = CriticalValueMethod.TABLE
    min_sample_size: int = 1

    def __post_init__(self):
        self.significance_level = validate_significance_level(self.significance_level)
        self.confidence_level = validate_significance_level(self.confidence_level, "confidence_level")
        self.critical_value_method = coerce_method(self.critical_value_method)
        if int(self.min_sample_size) < 1:
            raise ConfigValidationError(
                "comparison", "min_sample_size", self.min_sample_size, "must be at least 1"
            )
        self.min_sample_size = int(self.min_sample_size)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "ComparisonConfig":
        """Build a configuration from PERFGATE_* environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, Any] = {}
        if env.get("PERFGATE_SIGNIFICANCE_LEVEL"):
            kwargs["significance_level"] = env["PERFGATE_SIGNIFICANCE_LEVEL"]
        if env.get("PERFGATE_CONFIDENCE_LEVEL"):
            kwargs["confidence_level"] = env["PERFGATE_CONFIDENCE_LEVEL"]
        if env.get("PERFGATE_CRITICAL_VALUES"):
            kwargs["critical_value_method"] = env["PERFGATE_CRITICAL_VALUES"]
        if env.get("PERFGATE_MIN_SAMPLES"):
            try:
                kwargs["min_sample_size"] = int(env["PERFGATE_MIN_SAMPLES"])
            except ValueError:
                raise ConfigValidationError(
                    "comparison", "min_sample_size", env["PERFGATE_MIN_SAMPLES"], "must be an integer"
                ) from None
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "significance_level": self.significance_level,
            "confidence_level": self.confidence_level,
            "critical_value_method": self.critical_value_method.value,
            "min_sample_size": self.min_sample_size,
        }

    def update(self, **kwargs) -> None:
        """Update configuration with keyword arguments; on failure nothing changes."""
        names = {f.name for f in fields(self)}
        for key in kwargs:
            if key not in names:
                raise ValueError(f"Unknown configuration parameter: {key}")
        candidate = replace(self, **kwargs)
        for name in names:
            setattr(self, name, getattr(candidate, name))


# Global default configuration instance
default_config = ComparisonConfig()


def get_config() -> ComparisonConfig:
    """Get the global default configuration."""
    return default_config


def set_config(config: ComparisonConfig) -> None:
    """Set the global default configuration."""
    global default_config
    default_config = config


def configure(**kwargs) -> ComparisonConfig:
    """Configure perfgate with keyword arguments."""
    config = ComparisonConfig()
    config.update(**kwargs)
    set_config(config)
    return config

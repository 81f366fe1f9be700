"""
perfgate: statistical performance regression detection

Turns repeated timing and utilization samples into a regression,
improvement or no-change verdict using Welch's t-test.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("perfgate")
except PackageNotFoundError:
    __version__ = "0.2.0"  # Fallback for development

from .core.config import ComparisonConfig, CriticalValueMethod, configure, get_config, set_config
from .core.errors import (
    BaselineNotFoundError,
    ConfigValidationError,
    EmptySampleSetError,
    PerfGateError,
    ValidationError,
)
from .regression import (
    InMemoryBaselineStore,
    JsonBaselineStore,
    MeasurementSet,
    RegressionDetector,
    RunResult,
    format_comparison_report,
    format_statistics_report,
)
from .statistics import (
    ComparisonResult,
    DescriptiveStatistics,
    ExitCode,
    MetricComparison,
    QualityRating,
    Verdict,
    classify_quality,
    compare,
    compute_statistics,
    critical_value,
    is_significant,
    verdict,
    welch_t_test,
)

__all__ = [
    "__version__",

    # Configuration
    "ComparisonConfig", "CriticalValueMethod", "configure", "get_config", "set_config",

    # Errors
    "PerfGateError", "ValidationError", "ConfigValidationError",
    "EmptySampleSetError", "BaselineNotFoundError",

    # Statistical engine
    "DescriptiveStatistics", "QualityRating", "classify_quality", "compute_statistics",
    "critical_value", "welch_t_test", "is_significant",
    "ComparisonResult", "MetricComparison", "compare",
    "Verdict", "ExitCode", "verdict",

    # Regression testing
    "RunResult", "MeasurementSet", "RegressionDetector",
    "InMemoryBaselineStore", "JsonBaselineStore",
    "format_statistics_report", "format_comparison_report",
]

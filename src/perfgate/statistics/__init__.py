"""
Statistical engine.

Raw samples -> per-set statistics -> cross-set comparison -> verdict. All
functions are pure and safe to call from any thread.
"""

from .comparison import ComparisonResult, MetricComparison, compare, compare_metric, percent_change
from .critical_values import critical_value
from .descriptive import (
    ConfidenceInterval,
    DescriptiveStatistics,
    QualityRating,
    classify_quality,
    compute_statistics,
    percentile,
    summarize_metrics,
)
from .hypothesis import WelchTestResult, is_significant, welch_t_test, welch_test_from_statistics
from .verdict import ExitCode, Verdict, verdict

__all__ = [
    'ComparisonResult',
    'MetricComparison',
    'compare',
    'compare_metric',
    'percent_change',
    'critical_value',
    'ConfidenceInterval',
    'DescriptiveStatistics',
    'QualityRating',
    'classify_quality',
    'compute_statistics',
    'percentile',
    'summarize_metrics',
    'WelchTestResult',
    'is_significant',
    'welch_t_test',
    'welch_test_from_statistics',
    'ExitCode',
    'Verdict',
    'verdict',
]

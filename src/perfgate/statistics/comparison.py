"""
Comparison of a baseline sample set against a current one.

Combines per-set descriptive statistics with Welch's t-test into a single
ComparisonResult, and attaches before/after deltas for any auxiliary metrics
(utilization percentages, memory bandwidth, cache rates, instruction counts)
observed alongside the primary measurement.

Percentages throughout are already scaled by 100: a ``percent_change`` of
0.42 means 0.42%.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..core.config import (
    DEFAULT_CONFIDENCE_LEVEL,
    DEFAULT_SIGNIFICANCE_LEVEL,
    CriticalValueMethod,
    validate_significance_level,
)
from .critical_values import critical_value
from .descriptive import ConfidenceInterval, DescriptiveStatistics, as_sample_array, compute_statistics
from .hypothesis import WelchTestResult, welch_test_from_statistics

logger = logging.getLogger(__name__)


def percent_change(baseline: float, current: float) -> float:
    """(current - baseline) / baseline * 100, or 0.0 when the baseline is zero."""
    if baseline == 0:
        return 0.0
    return (current - baseline) / baseline * 100.0


@dataclass(frozen=True)
class MetricComparison:
    """Before/after values of one auxiliary metric"""
    baseline: float
    current: float
    absolute_change: float
    percent_change: float

    @classmethod
    def from_values(cls, baseline: float, current: float) -> 'MetricComparison':
        return cls(
            baseline=float(baseline),
            current=float(current),
            absolute_change=float(current) - float(baseline),
            percent_change=percent_change(float(baseline), float(current)),
        )

    def to_dict(self) -> dict[str, float]:
        return {
            'baseline': self.baseline,
            'current': self.current,
            'absolute_change': self.absolute_change,
            'percent_change': self.percent_change,
        }


def compare_metric(
    baseline_values: Iterable[float],
    current_values: Iterable[float],
    name: str = "metric",
) -> MetricComparison | None:
    """
    Compare the means of one auxiliary metric.

    Returns None when either side has no observations; the metric simply was
    not sampled in that run.
    """
    baseline_values = list(baseline_values)
    current_values = list(current_values)
    if not baseline_values or not current_values:
        return None

    baseline_mean = float(np.mean(as_sample_array(baseline_values, f"{name} (baseline)")))
    current_mean = float(np.mean(as_sample_array(current_values, f"{name} (current)")))
    return MetricComparison.from_values(baseline_mean, current_mean)


@dataclass(frozen=True)
class ComparisonResult:
    """Result of statistical comparison between baseline and current sample sets"""
    baseline_statistics: DescriptiveStatistics
    current_statistics: DescriptiveStatistics
    mean_difference: float
    mean_difference_percent: float
    confidence_interval: ConfidenceInterval
    is_significant: bool
    significance_level: float
    welch: WelchTestResult | None = None
    auxiliary_metric_comparisons: dict[str, MetricComparison] = field(default_factory=dict)

    @property
    def is_regression(self) -> bool:
        """Significant increase; higher values are slower."""
        return self.is_significant and self.mean_difference > 0

    @property
    def is_improvement(self) -> bool:
        return self.is_significant and self.mean_difference < 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'baseline_statistics': self.baseline_statistics.to_dict(),
            'current_statistics': self.current_statistics.to_dict(),
            'mean_difference': self.mean_difference,
            'mean_difference_percent': self.mean_difference_percent,
            'confidence_interval': [self.confidence_interval.lower, self.confidence_interval.upper],
            'is_significant': self.is_significant,
            'significance_level': self.significance_level,
            'is_regression': self.is_regression,
            'is_improvement': self.is_improvement,
            'welch': self.welch.to_dict() if self.welch else None,
            'auxiliary_metric_comparisons': {
                name: comparison.to_dict()
                for name, comparison in self.auxiliary_metric_comparisons.items()
            },
        }


def compare(
    baseline: Iterable[float],
    current: Iterable[float],
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
    auxiliary_metrics: Mapping[str, tuple[Iterable[float], Iterable[float]]] | None = None,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
) -> ComparisonResult:
    """
    Compare two sample sets statistically.

    A single-sample set has no variance estimate. When both sets are
    singletons the pooled standard error is zero, so the difference interval
    collapses to the point difference and ``welch.degenerate`` is set; that
    interval expresses no certainty and the result is never significant.

    Args:
        baseline: Baseline samples
        current: Current samples
        significance_level: Alpha for Welch's t-test, strictly inside (0, 1)
        auxiliary_metrics: Mapping of metric name to (baseline_values, current_values)
        method: Critical value method
        confidence_level: Confidence level of each set's own interval

    Returns:
        ComparisonResult

    Raises:
        EmptySampleSetError: if either primary sample set is empty
        ConfigValidationError: if ``significance_level`` is outside (0, 1)
    """
    alpha = validate_significance_level(significance_level)
    baseline_stats = compute_statistics(baseline, confidence_level, method, label="baseline")
    current_stats = compute_statistics(current, confidence_level, method, label="current")

    mean_difference = current_stats.mean - baseline_stats.mean
    mean_difference_percent = percent_change(baseline_stats.mean, current_stats.mean)

    welch = welch_test_from_statistics(baseline_stats, current_stats, alpha, method)

    df = min(baseline_stats.sample_count, current_stats.sample_count) - 1
    margin = critical_value(df, 1.0 - alpha, method) * welch.pooled_standard_error
    interval = ConfidenceInterval(mean_difference - margin, mean_difference + margin)

    comparisons: dict[str, MetricComparison] = {}
    for name, (baseline_values, current_values) in (auxiliary_metrics or {}).items():
        comparison = compare_metric(baseline_values, current_values, name)
        if comparison is None:
            logger.debug(f"Auxiliary metric '{name}' not observed on both sides, skipping")
            continue
        comparisons[name] = comparison

    logger.debug(
        f"Compared n={baseline_stats.sample_count} vs n={current_stats.sample_count}: "
        f"diff={mean_difference:+.6g} ({mean_difference_percent:+.2f}%) significant={welch.is_significant}"
    )

    return ComparisonResult(
        baseline_statistics=baseline_stats,
        current_statistics=current_stats,
        mean_difference=mean_difference,
        mean_difference_percent=mean_difference_percent,
        confidence_interval=interval,
        is_significant=welch.is_significant,
        significance_level=alpha,
        welch=welch,
        auxiliary_metric_comparisons=comparisons,
    )


__all__ = [
    "percent_change",
    "MetricComparison",
    "compare_metric",
    "ComparisonResult",
    "compare",
]

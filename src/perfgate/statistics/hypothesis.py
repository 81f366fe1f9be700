"""
Welch's two-sample t-test.

Decides whether two sample sets have different means without assuming equal
variances or equal sample counts.
"""

import logging
import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ..core.config import DEFAULT_SIGNIFICANCE_LEVEL, CriticalValueMethod, validate_significance_level
from .critical_values import critical_value
from .descriptive import DescriptiveStatistics, compute_statistics

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WelchTestResult:
    """Outcome of Welch's t-test between a baseline and a current sample set"""
    t_statistic: float
    degrees_of_freedom: float
    critical_value: float
    pooled_standard_error: float
    significance_level: float
    is_significant: bool
    degenerate: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            't_statistic': self.t_statistic,
            'degrees_of_freedom': self.degrees_of_freedom,
            'critical_value': self.critical_value,
            'pooled_standard_error': self.pooled_standard_error,
            'significance_level': self.significance_level,
            'is_significant': self.is_significant,
            'degenerate': self.degenerate,
        }


def pooled_standard_error(baseline: DescriptiveStatistics, current: DescriptiveStatistics) -> float:
    """sqrt(se1^2 + se2^2); a singleton set contributes no variance."""
    return math.sqrt(baseline.standard_error ** 2 + current.standard_error ** 2)


def welch_satterthwaite_df(baseline: DescriptiveStatistics, current: DescriptiveStatistics) -> float:
    """
    Welch-Satterthwaite approximation of the degrees of freedom.

    A singleton set has no within-set variance, so its term is dropped. When
    neither set has variance the pooled df ``n1 + n2 - 2`` is returned.
    """
    var1 = baseline.standard_error ** 2
    var2 = current.standard_error ** 2

    denominator = 0.0
    if baseline.sample_count > 1:
        denominator += var1 ** 2 / (baseline.sample_count - 1)
    if current.sample_count > 1:
        denominator += var2 ** 2 / (current.sample_count - 1)

    if denominator == 0.0:
        return float(max(baseline.sample_count + current.sample_count - 2, 0))
    return (var1 + var2) ** 2 / denominator


def welch_test_from_statistics(
    baseline: DescriptiveStatistics,
    current: DescriptiveStatistics,
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
) -> WelchTestResult:
    """
    Run Welch's t-test on precomputed statistics.

    When the pooled standard error is zero the test is degenerate: equal means
    are never significant, and a difference is significant only if both sets
    had at least two samples (genuinely zero variance). A singleton set carries
    no variance information, so a difference involving one is reported as not
    significant rather than dividing by zero.
    """
    alpha = validate_significance_level(significance_level)
    se = pooled_standard_error(baseline, current)
    df = welch_satterthwaite_df(baseline, current)
    critical = critical_value(round(df), 1.0 - alpha, method)
    difference = baseline.mean - current.mean

    if se > 0.0:
        t_statistic = difference / se
        significant = abs(t_statistic) > critical
        degenerate = False
    else:
        degenerate = True
        if difference == 0.0:
            t_statistic = 0.0
            significant = False
        else:
            t_statistic = math.copysign(math.inf, difference)
            significant = baseline.sample_count > 1 and current.sample_count > 1
        logger.debug(
            f"Zero pooled standard error (n1={baseline.sample_count}, n2={current.sample_count}); "
            f"significant={significant}"
        )

    logger.debug(f"Welch t={t_statistic:.4f} df={df:.2f} critical={critical:.3f} alpha={alpha}")

    return WelchTestResult(
        t_statistic=t_statistic,
        degrees_of_freedom=df,
        critical_value=critical,
        pooled_standard_error=se,
        significance_level=alpha,
        is_significant=significant,
        degenerate=degenerate,
    )


def welch_t_test(
    baseline_samples: Iterable[float],
    current_samples: Iterable[float],
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
) -> WelchTestResult:
    """Run Welch's t-test on two raw sample sets."""
    baseline = compute_statistics(baseline_samples, method=method, label="baseline")
    current = compute_statistics(current_samples, method=method, label="current")
    return welch_test_from_statistics(baseline, current, significance_level, method)


def is_significant(
    baseline_samples: Iterable[float],
    current_samples: Iterable[float],
    significance_level: float = DEFAULT_SIGNIFICANCE_LEVEL,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
) -> bool:
    """True if the two sample sets differ significantly at ``significance_level``."""
    return welch_t_test(baseline_samples, current_samples, significance_level, method).is_significant


__all__ = [
    "WelchTestResult",
    "pooled_standard_error",
    "welch_satterthwaite_df",
    "welch_test_from_statistics",
    "welch_t_test",
    "is_significant",
]

"""
Descriptive statistics for a single sample set.

Reduces repeated measurements of one metric to mean, sample standard
deviation, range, median, coefficient of variation, a confidence interval of
the mean, and a quality rating derived from the coefficient of variation.
"""

import logging
import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, NamedTuple

import numpy as np

from ..core.config import DEFAULT_CONFIDENCE_LEVEL, CriticalValueMethod
from ..core.errors import EmptySampleSetError, NonFiniteSampleError
from .critical_values import critical_value

logger = logging.getLogger(__name__)


class QualityRating(Enum):
    """Reliability of a sample set, judged by its coefficient of variation"""
    EXCELLENT = "Excellent"  # CV < 5%
    GOOD = "Good"            # CV < 10%
    FAIR = "Fair"            # CV < 20%
    POOR = "Poor"            # CV >= 20%


def classify_quality(coefficient_of_variation: float) -> QualityRating:
    """Map a coefficient of variation to a quality rating."""
    if coefficient_of_variation < 0.05:
        return QualityRating.EXCELLENT
    elif coefficient_of_variation < 0.10:
        return QualityRating.GOOD
    elif coefficient_of_variation < 0.20:
        return QualityRating.FAIR
    else:
        return QualityRating.POOR


class ConfidenceInterval(NamedTuple):
    """Closed interval [lower, upper]"""
    lower: float
    upper: float

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def contains(self, value: float) -> bool:
        return self.lower <= value <= self.upper


@dataclass(frozen=True)
class DescriptiveStatistics:
    """Statistical summary of one sample set"""
    mean: float
    standard_deviation: float
    min: float
    max: float
    median: float
    coefficient_of_variation: float
    sample_count: int
    confidence_interval: ConfidenceInterval
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL

    @property
    def variance(self) -> float:
        return self.standard_deviation ** 2

    @property
    def standard_error(self) -> float:
        """Standard error of the mean; 0 for a single sample."""
        return self.standard_deviation / math.sqrt(self.sample_count)

    @property
    def quality_rating(self) -> QualityRating:
        return classify_quality(self.coefficient_of_variation)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'mean': self.mean,
            'standard_deviation': self.standard_deviation,
            'min': self.min,
            'max': self.max,
            'median': self.median,
            'coefficient_of_variation': self.coefficient_of_variation,
            'sample_count': self.sample_count,
            'confidence_interval': [self.confidence_interval.lower, self.confidence_interval.upper],
            'confidence_level': self.confidence_level,
            'quality_rating': self.quality_rating.value,
        }


def as_sample_array(samples: Iterable[float], label: str = "samples") -> np.ndarray:
    """
    Validate samples and return them as a float array.

    Raises:
        EmptySampleSetError: if there are no samples
        NonFiniteSampleError: if any sample is NaN or infinite
    """
    values = np.asarray(list(samples), dtype=float)
    if values.size == 0:
        raise EmptySampleSetError(label)

    finite = np.isfinite(values)
    if not finite.all():
        index = int(np.argmin(finite))
        raise NonFiniteSampleError(label, index, float(values[index]))

    return values


def percentile(samples: Iterable[float], p: float, label: str = "samples") -> float:
    """
    Percentile by linear interpolation over the sorted samples.

    The fractional index is ``p / 100 * (n - 1)``; an integral index returns that
    element, otherwise the two neighbours are interpolated.
    """
    if not 0.0 <= p <= 100.0:
        raise ValueError(f"Percentile must be within [0, 100], got {p}")
    values = as_sample_array(samples, label)
    return float(np.percentile(values, p, method="linear"))


def compute_statistics(
    samples: Iterable[float],
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
    label: str = "samples",
) -> DescriptiveStatistics:
    """
    Calculate descriptive statistics for a sample set.

    Args:
        samples: Non-empty sequence of measurements
        confidence_level: Confidence level of the interval around the mean
        method: Critical value method used for the interval
        label: Name of the sample set, used in error details

    Returns:
        DescriptiveStatistics for the samples

    Raises:
        EmptySampleSetError: if ``samples`` is empty
    """
    values = as_sample_array(samples, label)
    n = int(values.size)

    lo = float(values.min())
    hi = float(values.max())
    # Rounding can push the mean of near-constant samples just outside [min, max]
    mean = min(max(float(np.mean(values)), lo), hi)

    if n > 1:
        standard_deviation = float(np.sqrt(np.sum((values - mean) ** 2) / (n - 1)))
    else:
        standard_deviation = 0.0

    coefficient_of_variation = standard_deviation / mean if mean != 0 else 0.0
    median = min(max(float(np.percentile(values, 50.0, method="linear")), lo), hi)

    if n > 1:
        t_value = critical_value(n - 1, confidence_level, method)
        margin = t_value * standard_deviation / math.sqrt(n)
    else:
        margin = 0.0

    logger.debug(f"{label}: n={n} mean={mean:.6g} std={standard_deviation:.6g} cv={coefficient_of_variation:.4f}")

    return DescriptiveStatistics(
        mean=mean,
        standard_deviation=standard_deviation,
        min=lo,
        max=hi,
        median=median,
        coefficient_of_variation=coefficient_of_variation,
        sample_count=n,
        confidence_interval=ConfidenceInterval(mean - margin, mean + margin),
        confidence_level=confidence_level,
    )


def summarize_metrics(
    metrics: Mapping[str, Iterable[float]],
    confidence_level: float = DEFAULT_CONFIDENCE_LEVEL,
    method: CriticalValueMethod | str = CriticalValueMethod.TABLE,
) -> dict[str, DescriptiveStatistics]:
    """Statistics for each named metric; metrics with no observations are omitted."""
    summaries = {}
    for name, values in metrics.items():
        values = list(values)
        if not values:
            continue
        summaries[name] = compute_statistics(values, confidence_level, method, label=name)
    return summaries


__all__ = [
    "QualityRating",
    "classify_quality",
    "ConfidenceInterval",
    "DescriptiveStatistics",
    "as_sample_array",
    "percentile",
    "compute_statistics",
    "summarize_metrics",
]

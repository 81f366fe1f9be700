#!/usr/bin/env python3
"""
Regression Detection Engine for Performance Testing

Compares a current measurement set against its baseline with Welch's t-test
and maps the outcome onto a verdict and process exit code.
"""

import logging
from dataclasses import dataclass

from ..core.config import ComparisonConfig, get_config
from ..core.errors import SampleSetError
from ..statistics.comparison import ComparisonResult, compare, percent_change
from ..statistics.verdict import ExitCode, Verdict, verdict
from .baseline_store import BaselineStore
from .measurement import MeasurementSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThresholdResult:
    """Single-measurement check against a fixed regression threshold"""
    passed: bool
    change: float       # fraction, positive = slower
    threshold: float    # fraction, e.g. 0.05 for 5%

    @property
    def change_percent(self) -> float:
        return self.change * 100.0


class RegressionDetector:
    """
    Detects performance regressions using statistical analysis.

    The primary samples decide the verdict; auxiliary metrics observed on both
    sides are reported as before/after deltas only.
    """

    def __init__(self, config: ComparisonConfig | None = None):
        self.config = config or get_config()

    def compare(self, baseline: MeasurementSet, current: MeasurementSet) -> ComparisonResult:
        """
        Compare a current measurement set against a baseline.

        Raises:
            SampleSetError: if either side has fewer samples than ``min_sample_size``
        """
        for side, measurements in (("baseline", baseline), ("current", current)):
            if measurements.iteration_count < self.config.min_sample_size:
                raise SampleSetError(
                    f"Not enough {side} samples for '{measurements.label}'",
                    {
                        "label": measurements.label,
                        "side": side,
                        "count": measurements.iteration_count,
                        "required": self.config.min_sample_size,
                    }
                )

        baseline_metrics = baseline.metric_samples()
        current_metrics = current.metric_samples()
        auxiliary = {
            name: (baseline_metrics[name], current_metrics[name])
            for name in baseline_metrics
            if name in current_metrics
        }
        unmatched = set(baseline_metrics).symmetric_difference(current_metrics)
        if unmatched:
            logger.debug(f"Metrics only present on one side: {sorted(unmatched)}")

        if 1 in (baseline.iteration_count, current.iteration_count):
            logger.warning(
                f"'{current.label}' compared with a single-sample set; "
                "its variance is unknown and significance is unreliable"
            )

        return compare(
            baseline.samples,
            current.samples,
            significance_level=self.config.significance_level,
            auxiliary_metrics=auxiliary,
            method=self.config.critical_value_method,
            confidence_level=self.config.confidence_level,
        )

    def check(self, store: BaselineStore, key: str, current: MeasurementSet) -> ComparisonResult:
        """Compare ``current`` against the baseline stored under ``key``."""
        baseline = store.load(key)
        return self.compare(baseline, current)

    def batch_analyze(
        self,
        measurements: dict[str, MeasurementSet],
        baselines: dict[str, MeasurementSet]
    ) -> dict[str, ComparisonResult]:
        """
        Analyze multiple measurement sets for regressions.

        Names without a baseline are skipped with a warning.
        """
        results = {}

        for name, current in measurements.items():
            if name in baselines:
                results[name] = self.compare(baselines[name], current)
            else:
                logger.warning(f"No baseline found for: {name}")

        return results

    @staticmethod
    def verdict(result: ComparisonResult) -> Verdict:
        return verdict(result)

    @staticmethod
    def exit_code(result: ComparisonResult) -> ExitCode:
        return verdict(result).exit_code

    @staticmethod
    def check_threshold(current_value: float, baseline_value: float, threshold: float) -> ThresholdResult:
        """
        Legacy single-measurement check.

        Passes when the relative slowdown is at most ``threshold`` (a fraction);
        improvements always pass.
        """
        if threshold < 0:
            raise ValueError(f"Threshold must be non-negative, got {threshold}")
        change = percent_change(baseline_value, current_value) / 100.0
        return ThresholdResult(passed=change <= threshold, change=change, threshold=threshold)


__all__ = ["ThresholdResult", "RegressionDetector"]

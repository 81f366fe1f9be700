#!/usr/bin/env python3
"""
Plain-text reports for statistics and comparisons.

Percent values in ComparisonResult are already scaled by 100 and are printed
as-is.
"""

from ..statistics.comparison import ComparisonResult
from ..statistics.descriptive import DescriptiveStatistics
from ..statistics.verdict import Verdict, verdict

SEPARATOR = "=" * 60

RESULT_LINES = {
    Verdict.REGRESSION: "Result: PERFORMANCE REGRESSION DETECTED",
    Verdict.IMPROVEMENT: "Result: PERFORMANCE IMPROVEMENT DETECTED",
    Verdict.NO_CHANGE: "Result: NO SIGNIFICANT CHANGE DETECTED",
}


def format_statistics_report(
    stats: DescriptiveStatistics,
    unit: str = "ms",
    title: str = "Statistics",
) -> str:
    """Summary block for one sample set."""
    level = f"{stats.confidence_level * 100:g}%"
    lines = [
        f"{title}:",
        f"- Average: {stats.mean:.3f} {unit}",
        f"- Standard Deviation: {stats.standard_deviation:.3f} {unit}",
        f"- Range: {stats.min:.3f} - {stats.max:.3f} {unit}",
        f"- Median: {stats.median:.3f} {unit}",
        f"- Coefficient of Variation: {stats.coefficient_of_variation * 100:.1f}%",
        f"- {level} Confidence Interval: {stats.confidence_interval.lower:.3f} - "
        f"{stats.confidence_interval.upper:.3f} {unit}",
        f"- Quality: {stats.quality_rating.value}",
        f"- Samples: {stats.sample_count}",
    ]
    return "\n".join(lines)


def format_comparison_report(
    result: ComparisonResult,
    unit: str = "ms",
    metric_labels: dict[str, str] | None = None,
    title: str = "PERFORMANCE TEST RESULTS",
) -> str:
    """
    Human-readable delta report.

    Args:
        result: Comparison to describe
        unit: Unit of the primary metric
        metric_labels: Optional display names for auxiliary metrics
        title: Heading of the report
    """
    labels = metric_labels or {}
    baseline = result.baseline_statistics
    current = result.current_statistics

    lines = [
        SEPARATOR,
        title,
        "",
        "Time Comparison:",
        f"- Baseline:  {baseline.mean:.3f} {unit}  (n={baseline.sample_count})",
        f"- Current:   {current.mean:.3f} {unit}  (n={current.sample_count})",
        f"- Average:   {result.mean_difference:+.3f} {unit}  ({result.mean_difference_percent:+.1f}%)",
        f"- Standard Deviation: {current.standard_deviation:.3f} {unit}",
        f"- Coefficient of Variation: {current.coefficient_of_variation * 100:.1f}%",
        f"- Quality: {current.quality_rating.value} (baseline: {baseline.quality_rating.value})",
    ]

    if result.auxiliary_metric_comparisons:
        lines += ["", "Auxiliary Metrics Comparison:"]
        for name, comparison in result.auxiliary_metric_comparisons.items():
            label = labels.get(name, name)
            lines.append(
                f"- {label}: {comparison.baseline:.3f} -> {comparison.current:.3f}  "
                f"({comparison.absolute_change:+.3f}, {comparison.percent_change:+.1f}%)"
            )

    level = f"{(1.0 - result.significance_level) * 100:g}%"
    if result.is_significant:
        reliability = "Statistically significant (real change, not random)"
    else:
        reliability = "Not statistically significant (could be random variation)"

    if min(baseline.sample_count, current.sample_count) == 1 and result.welch and result.welch.degenerate:
        difference_range = "- Difference Range: n/a (single-sample set, variance unknown)"
    else:
        difference_range = (
            f"- Difference Range: {result.confidence_interval.lower:+.3f} to "
            f"{result.confidence_interval.upper:+.3f} {unit}  ({level} confidence)"
        )

    lines += [
        "",
        "Statistical Analysis:",
        difference_range,
        f"- Reliability: {reliability}",
        "",
        RESULT_LINES[verdict(result)],
    ]
    return "\n".join(lines)


__all__ = ["format_statistics_report", "format_comparison_report"]

"""
Tests for the comparison aggregator and verdict derivation.
"""

import pytest

from perfgate.core.errors import ConfigValidationError, EmptySampleSetError
from perfgate.statistics.comparison import MetricComparison, compare, compare_metric, percent_change
from perfgate.statistics.verdict import ExitCode, Verdict, verdict


class TestScenarios:
    """End-to-end comparison scenarios"""

    def test_identical_sets(self, stable_samples):
        """Identical sets are never a significant change"""
        result = compare(stable_samples, list(stable_samples))

        assert not result.is_significant
        assert result.mean_difference == 0.0
        assert verdict(result) == Verdict.NO_CHANGE

    def test_clear_regression(self, baseline_10ms, current_15ms):
        """10 ms -> 15 ms with low noise"""
        result = compare(baseline_10ms, current_15ms)

        assert result.mean_difference == pytest.approx(5.0)
        assert result.mean_difference_percent == pytest.approx(50.0)
        assert result.is_significant
        assert result.is_regression
        assert not result.is_improvement
        assert verdict(result) == Verdict.REGRESSION

    def test_clear_improvement(self):
        """20 ms -> 12 ms with low noise"""
        noise = [-0.1, -0.05, 0.0, 0.05, 0.1] * 4
        result = compare([20.0 + d for d in noise], [12.0 + d for d in noise])

        assert result.mean_difference == pytest.approx(-8.0)
        assert result.is_improvement
        assert verdict(result) == Verdict.IMPROVEMENT

    def test_high_noise_no_call(self, noisy_pair):
        """Means differ by 1 but five noisy samples cannot tell"""
        baseline, current = noisy_pair
        result = compare(baseline, current)

        assert result.mean_difference == pytest.approx(1.0)
        assert not result.is_significant
        assert verdict(result) == Verdict.NO_CHANGE

    def test_singleton_sets(self):
        """Singletons produce a defined, non-significant result"""
        result = compare([10.0], [10.5])

        assert result.mean_difference == pytest.approx(0.5)
        assert result.mean_difference_percent == pytest.approx(5.0)
        assert not result.is_significant
        assert result.confidence_interval.lower == pytest.approx(0.5)
        assert result.confidence_interval.upper == pytest.approx(0.5)
        assert verdict(result) == Verdict.NO_CHANGE


class TestDifferenceInterval:
    """Test the confidence interval of the difference"""

    def test_margin_uses_min_n_and_pooled_se(self):
        """df = min(n1, n2) - 1 = 2 -> 2.776 at 95%"""
        result = compare([1.0, 2.0, 3.0], [4.0, 5.0, 6.0])
        margin = 2.776 * (2.0 / 3.0) ** 0.5

        assert result.confidence_interval.lower == pytest.approx(3.0 - margin)
        assert result.confidence_interval.upper == pytest.approx(3.0 + margin)

    def test_singletons_collapse_to_point(self):
        """Zero pooled SE from two singletons: point interval, flagged degenerate"""
        result = compare([10.0], [10.5])

        assert result.confidence_interval.lower == pytest.approx(0.5)
        assert result.confidence_interval.width == 0.0
        assert result.welch.degenerate
        assert not result.is_significant

    def test_stricter_alpha_widens_interval(self):
        a, b = [1.0, 2.0, 3.0, 2.5], [4.0, 5.0, 6.0, 4.5]
        loose = compare(a, b, significance_level=0.05)
        strict = compare(a, b, significance_level=0.01)

        assert strict.confidence_interval.width > loose.confidence_interval.width
        assert strict.significance_level == 0.01


class TestAuxiliaryMetrics:
    """Test before/after deltas of auxiliary metrics"""

    def test_utilization_percent_change(self, baseline_10ms, current_15ms):
        result = compare(
            baseline_10ms,
            current_15ms,
            auxiliary_metrics={"total_utilization": ([50.0, 50.0], [55.0, 55.0])},
        )
        comparison = result.auxiliary_metric_comparisons["total_utilization"]

        assert comparison.baseline == pytest.approx(50.0)
        assert comparison.current == pytest.approx(55.0)
        assert comparison.absolute_change == pytest.approx(5.0)
        assert comparison.percent_change == pytest.approx(10.0)

    def test_missing_side_is_omitted(self, stable_samples):
        """Metrics not observed on both sides are left out silently"""
        result = compare(
            stable_samples,
            stable_samples,
            auxiliary_metrics={
                "cache_hits": ([100.0], []),
                "cache_misses": ([], [4.0]),
                "instructions_executed": ([1e6], [1.1e6]),
            },
        )

        assert list(result.auxiliary_metric_comparisons) == ["instructions_executed"]

    def test_zero_baseline(self):
        """Percent change is 0 when the baseline is zero"""
        comparison = MetricComparison.from_values(0.0, 3.0)

        assert comparison.absolute_change == 3.0
        assert comparison.percent_change == 0.0

    def test_compare_metric_uses_means(self):
        comparison = compare_metric([900.0, 1100.0], [1200.0, 1200.0], "memory_bandwidth")

        assert comparison.baseline == pytest.approx(1000.0)
        assert comparison.percent_change == pytest.approx(20.0)

    def test_compare_metric_empty(self):
        assert compare_metric([], [1.0]) is None

    def test_percent_change_helper(self):
        assert percent_change(50.0, 55.0) == pytest.approx(10.0)
        assert percent_change(0.0, 1.0) == 0.0


class TestComparisonEdgeCases:
    """Test validation and numeric fallbacks"""

    def test_zero_baseline_mean(self):
        result = compare([0.0, 0.0], [1.0, 1.0])

        assert result.mean_difference_percent == 0.0
        assert result.mean_difference == 1.0

    def test_empty_baseline(self):
        with pytest.raises(EmptySampleSetError) as exc_info:
            compare([], [1.0])
        assert exc_info.value.details["label"] == "baseline"

    def test_invalid_alpha(self):
        with pytest.raises(ConfigValidationError):
            compare([1.0, 2.0], [1.0, 2.0], significance_level=1.0)

    def test_to_dict(self, baseline_10ms, current_15ms):
        data = compare(
            baseline_10ms, current_15ms, auxiliary_metrics={"util": ([50.0], [55.0])}
        ).to_dict()

        assert data['is_regression'] is True
        assert data['mean_difference_percent'] == pytest.approx(50.0)
        assert data['auxiliary_metric_comparisons']['util']['percent_change'] == pytest.approx(10.0)
        assert data['welch']['is_significant'] is True


class TestVerdict:
    """Test verdict and exit code mapping"""

    def test_exit_codes(self):
        assert Verdict.REGRESSION.exit_code == ExitCode.FAILURE == 1
        assert Verdict.IMPROVEMENT.exit_code == ExitCode.SUCCESS == 0
        assert Verdict.NO_CHANGE.exit_code == ExitCode.SUCCESS
        assert ExitCode.ERROR == 2

    def test_is_failure(self):
        assert Verdict.REGRESSION.is_failure
        assert not Verdict.IMPROVEMENT.is_failure

    def test_values(self):
        assert Verdict.NO_CHANGE.value == "no-change"

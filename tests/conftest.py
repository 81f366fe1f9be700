"""
Shared pytest fixtures for the perfgate test suite.

This module provides reusable fixtures for:
- Deterministic low-noise and high-noise sample sets
- Measurement sets carrying auxiliary metrics
- Temporary baseline stores and sample files
- Global configuration isolation
"""

import json

import pytest

from perfgate.core.config import ComparisonConfig, get_config, set_config
from perfgate.regression.baseline_store import JsonBaselineStore
from perfgate.regression.measurement import MeasurementSet

# Symmetric +/-0.1 jitter, repeated to 20 samples
NOISE = [-0.1, -0.05, 0.0, 0.05, 0.1] * 4


def pytest_configure(config):
    config.addinivalue_line("markers", "property_based: hypothesis-driven property tests")


# ============================================================================
# Sample Fixtures
# ============================================================================

@pytest.fixture
def stable_samples():
    """Five tightly clustered timings around 10 ms."""
    return [10.0, 10.1, 9.9, 10.0, 10.05]


@pytest.fixture
def baseline_10ms():
    """Twenty samples of 10 ms +/- 0.1."""
    return [10.0 + d for d in NOISE]


@pytest.fixture
def current_15ms():
    """Twenty samples of 15 ms +/- 0.1."""
    return [15.0 + d for d in NOISE]


@pytest.fixture
def noisy_pair():
    """Two n=5 sets with mean 10 and 11 and standard deviations around 4-6."""
    return [5.0, 15.0, 8.0, 14.0, 8.0], [16.0, 4.0, 12.0, 17.0, 6.0]


# ============================================================================
# Measurement Fixtures
# ============================================================================

@pytest.fixture
def baseline_set(baseline_10ms):
    """Baseline measurement set with utilization and bandwidth counters."""
    return MeasurementSet.from_samples(
        baseline_10ms,
        metrics={
            "total_utilization": [50.0] * 20,
            "memory_bandwidth": [1000.0] * 20,
        },
        label="baseline",
        configuration={"preset": "moderate"},
    )


@pytest.fixture
def current_set(current_15ms):
    """Slower measurement set with the same counters plus one new metric."""
    return MeasurementSet.from_samples(
        current_15ms,
        metrics={
            "total_utilization": [55.0] * 20,
            "memory_bandwidth": [900.0] * 20,
            "cache_hit_rate": [0.9] * 20,
        },
        label="current",
        configuration={"preset": "moderate"},
    )


# ============================================================================
# Storage / Files
# ============================================================================

@pytest.fixture
def json_store(tmp_path):
    """Baseline store rooted in a temporary directory."""
    return JsonBaselineStore(tmp_path / "baselines")


@pytest.fixture
def write_samples(tmp_path):
    """Write JSON sample data to a temporary file and return its path."""
    def _write(name, data):
        path = tmp_path / name
        path.write_text(json.dumps(data))
        return str(path)
    return _write


@pytest.fixture
def isolated_config():
    """Restore the global configuration after the test."""
    original = get_config()
    set_config(ComparisonConfig())
    yield
    set_config(original)

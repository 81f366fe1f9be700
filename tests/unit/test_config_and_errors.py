"""
Tests for configuration and the exception hierarchy.
"""

import pytest

from perfgate.core.config import (
    ComparisonConfig,
    CriticalValueMethod,
    configure,
    get_config,
    validate_significance_level,
)
from perfgate.core.errors import (
    BaselineNotFoundError,
    BaselineStorageError,
    ConfigValidationError,
    EmptySampleSetError,
    PerfGateError,
    SampleSetError,
    ValidationError,
    format_error_chain,
)


class TestComparisonConfig:
    """Test ComparisonConfig validation"""

    def test_defaults(self):
        config = ComparisonConfig()

        assert config.significance_level == 0.05
        assert config.confidence_level == 0.95
        assert config.critical_value_method is CriticalValueMethod.TABLE
        assert config.min_sample_size == 1

    @pytest.mark.parametrize("alpha", [0.0, 1.0, -0.5, 2.0, "abc"])
    def test_invalid_significance_level(self, alpha):
        with pytest.raises(ConfigValidationError) as exc_info:
            ComparisonConfig(significance_level=alpha)
        assert exc_info.value.details["parameter"] == "significance_level"

    def test_string_method_is_coerced(self):
        config = ComparisonConfig(critical_value_method="EXACT")
        assert config.critical_value_method is CriticalValueMethod.EXACT

    def test_invalid_min_sample_size(self):
        with pytest.raises(ConfigValidationError):
            ComparisonConfig(min_sample_size=0)

    def test_update(self):
        config = ComparisonConfig()
        config.update(significance_level=0.01, critical_value_method="exact")

        assert config.significance_level == 0.01
        assert config.critical_value_method is CriticalValueMethod.EXACT

    def test_update_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown configuration parameter"):
            ComparisonConfig().update(threshold=0.05)

    def test_update_revalidates(self):
        with pytest.raises(ConfigValidationError):
            ComparisonConfig().update(significance_level=5)

    def test_failed_update_leaves_config_unchanged(self, isolated_config):
        config = get_config()
        with pytest.raises(ConfigValidationError):
            config.update(significance_level=2, critical_value_method="exact")

        assert config.significance_level == 0.05
        assert config.critical_value_method is CriticalValueMethod.TABLE

    def test_from_env(self):
        config = ComparisonConfig.from_env({
            "PERFGATE_SIGNIFICANCE_LEVEL": "0.01",
            "PERFGATE_CRITICAL_VALUES": "exact",
            "PERFGATE_MIN_SAMPLES": "3",
        })

        assert config.significance_level == 0.01
        assert config.critical_value_method is CriticalValueMethod.EXACT
        assert config.min_sample_size == 3

    def test_from_env_bad_integer(self):
        with pytest.raises(ConfigValidationError):
            ComparisonConfig.from_env({"PERFGATE_MIN_SAMPLES": "many"})

    def test_to_dict(self):
        assert ComparisonConfig().to_dict()["critical_value_method"] == "table"

    def test_configure_sets_global(self, isolated_config):
        config = configure(significance_level=0.02)

        assert get_config() is config
        assert get_config().significance_level == 0.02

    def test_validate_significance_level(self):
        assert validate_significance_level("0.1") == 0.1


class TestErrors:
    """Test structured error details"""

    def test_hierarchy(self):
        assert issubclass(ConfigValidationError, ValidationError)
        assert issubclass(EmptySampleSetError, SampleSetError)
        assert issubclass(SampleSetError, PerfGateError)
        assert issubclass(BaselineNotFoundError, PerfGateError)

    def test_str_includes_details(self):
        error = EmptySampleSetError("baseline")

        assert "baseline" in str(error)
        assert "count=0" in str(error)

    def test_to_dict(self):
        data = BaselineNotFoundError("render-moderate", "/tmp/baselines").to_dict()

        assert data["error_type"] == "BaselineNotFoundError"
        assert data["details"]["key"] == "render-moderate"
        assert data["cause"] is None

    def test_format_error_chain(self):
        cause = OSError("disk full")
        error = BaselineStorageError("render", "save", "disk full", cause=cause)
        chain = format_error_chain(error)

        assert chain.startswith("BaselineStorageError")
        assert "Caused by: OSError: disk full" in chain

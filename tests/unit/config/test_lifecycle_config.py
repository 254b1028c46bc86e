"""Unit tests for LifecycleConfig."""

from __future__ import annotations

import pytest

from quality_lifecycle.config import (
    DEFAULT_LIFECYCLE_CONFIG,
    TEST_LIFECYCLE_CONFIG,
    LifecycleConfig,
)


class TestLifecycleConfigDefaults:
    """Default and test configurations."""

    def test_defaults(self) -> None:
        """Production defaults."""
        config = LifecycleConfig()

        assert config.log_environment == "production"
        assert config.max_comment_length == 10_000
        assert config.tooltip_date_format == "%b %d, %Y"
        assert config == DEFAULT_LIFECYCLE_CONFIG

    def test_test_config(self) -> None:
        """Test config uses console logs and a small comment limit."""
        assert TEST_LIFECYCLE_CONFIG.log_environment == "development"
        assert TEST_LIFECYCLE_CONFIG.max_comment_length == 500

    def test_frozen(self) -> None:
        """Config cannot be changed after creation."""
        with pytest.raises(AttributeError):
            DEFAULT_LIFECYCLE_CONFIG.max_comment_length = 1  # type: ignore[misc]


class TestLifecycleConfigValidation:
    """__post_init__ checks."""

    def test_unknown_log_environment(self) -> None:
        """Only production and development are supported."""
        with pytest.raises(ValueError, match="log_environment"):
            LifecycleConfig(log_environment="staging")

    @pytest.mark.parametrize("length", [0, -5, 100_001])
    def test_comment_length_bounds(self, length: int) -> None:
        """The comment limit must be within 1..100000."""
        with pytest.raises(ValueError, match="max_comment_length"):
            LifecycleConfig(max_comment_length=length)

    def test_blank_date_format(self) -> None:
        """A date format is required."""
        with pytest.raises(ValueError, match="tooltip_date_format"):
            LifecycleConfig(tooltip_date_format="  ")


class TestFromEnvironment:
    """Environment overrides."""

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Valid values are taken from the environment."""
        monkeypatch.setenv("LIFECYCLE_LOG_ENVIRONMENT", "Development")
        monkeypatch.setenv("LIFECYCLE_MAX_COMMENT_LENGTH", "2000")
        monkeypatch.setenv("LIFECYCLE_TOOLTIP_DATE_FORMAT", "%Y-%m-%d")

        config = LifecycleConfig.from_environment()

        assert config.log_environment == "development"
        assert config.max_comment_length == 2000
        assert config.tooltip_date_format == "%Y-%m-%d"

    def test_unset_environment_uses_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Nothing set means defaults."""
        for key in (
            "LIFECYCLE_LOG_ENVIRONMENT",
            "LIFECYCLE_MAX_COMMENT_LENGTH",
            "LIFECYCLE_TOOLTIP_DATE_FORMAT",
        ):
            monkeypatch.delenv(key, raising=False)

        assert LifecycleConfig.from_environment() == DEFAULT_LIFECYCLE_CONFIG

    @pytest.mark.parametrize("value", ["lots", "0", "999999"])
    def test_invalid_comment_length_falls_back(
        self, monkeypatch: pytest.MonkeyPatch, value: str
    ) -> None:
        """Unparseable or out-of-range limits fall back to the default."""
        monkeypatch.setenv("LIFECYCLE_MAX_COMMENT_LENGTH", value)

        assert LifecycleConfig.from_environment().max_comment_length == 10_000

    def test_invalid_log_environment_falls_back(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Unknown environments fall back to production."""
        monkeypatch.setenv("LIFECYCLE_LOG_ENVIRONMENT", "qa")

        assert LifecycleConfig.from_environment().log_environment == "production"

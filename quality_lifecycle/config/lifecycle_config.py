"""Lifecycle engine configuration.

Environment Variables:
- LIFECYCLE_LOG_ENVIRONMENT: 'production' (JSON logs) or 'development' (console)
  (default: production)
- LIFECYCLE_MAX_COMMENT_LENGTH: Maximum transition comment length in characters
  (default: 10000, min: 1, max: 100000)
- LIFECYCLE_TOOLTIP_DATE_FORMAT: strftime format for timeline tooltips
  (default: "%b %d, %Y")

Invalid values fall back to the defaults rather than failing startup.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from quality_lifecycle.domain.services.timeline_builder import DEFAULT_DATE_FORMAT


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    """Get a non-blank string environment variable with default."""
    value = os.environ.get(key)
    if value is None or not value.strip():
        return default
    return value


# =============================================================================
# Logging
# =============================================================================

LOG_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})

DEFAULT_LOG_ENVIRONMENT = "production"

# =============================================================================
# Transition comments
# =============================================================================

DEFAULT_MAX_COMMENT_LENGTH = 10_000

MIN_MAX_COMMENT_LENGTH = 1

MAX_MAX_COMMENT_LENGTH = 100_000


@dataclass(frozen=True)
class LifecycleConfig:
    """Configuration for the lifecycle engine.

    Attributes:
        log_environment: 'production' or 'development'; selects the log renderer.
        max_comment_length: Longest accepted transition comment, after stripping.
        tooltip_date_format: strftime format used for timeline tooltip dates.
    """

    log_environment: str = DEFAULT_LOG_ENVIRONMENT
    max_comment_length: int = DEFAULT_MAX_COMMENT_LENGTH
    tooltip_date_format: str = DEFAULT_DATE_FORMAT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.log_environment not in LOG_ENVIRONMENTS:
            raise ValueError(
                f"log_environment must be one of {sorted(LOG_ENVIRONMENTS)}, "
                f"got {self.log_environment!r}"
            )
        if not MIN_MAX_COMMENT_LENGTH <= self.max_comment_length <= MAX_MAX_COMMENT_LENGTH:
            raise ValueError(
                f"max_comment_length must be between {MIN_MAX_COMMENT_LENGTH} "
                f"and {MAX_MAX_COMMENT_LENGTH}, got {self.max_comment_length}"
            )
        if not self.tooltip_date_format.strip():
            raise ValueError("tooltip_date_format must not be blank")

    @classmethod
    def from_environment(cls) -> LifecycleConfig:
        """Create config from environment variables with defaults.

        Returns:
            LifecycleConfig with values from environment or defaults.
        """
        log_environment = _get_str_env(
            "LIFECYCLE_LOG_ENVIRONMENT", DEFAULT_LOG_ENVIRONMENT
        ).lower()
        if log_environment not in LOG_ENVIRONMENTS:
            log_environment = DEFAULT_LOG_ENVIRONMENT

        max_comment_length = _get_int_env(
            "LIFECYCLE_MAX_COMMENT_LENGTH", DEFAULT_MAX_COMMENT_LENGTH
        )
        if not MIN_MAX_COMMENT_LENGTH <= max_comment_length <= MAX_MAX_COMMENT_LENGTH:
            max_comment_length = DEFAULT_MAX_COMMENT_LENGTH

        return cls(
            log_environment=log_environment,
            max_comment_length=max_comment_length,
            tooltip_date_format=_get_str_env(
                "LIFECYCLE_TOOLTIP_DATE_FORMAT", DEFAULT_DATE_FORMAT
            ),
        )


# Default production config
DEFAULT_LIFECYCLE_CONFIG = LifecycleConfig()

# Testing config with console logs and a small comment limit
TEST_LIFECYCLE_CONFIG = LifecycleConfig(
    log_environment="development",
    max_comment_length=500,
)

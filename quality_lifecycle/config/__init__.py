"""Configuration module for the quality lifecycle engine.

Available Configurations:
- LifecycleConfig: Logging mode, comment limits and timeline date format
"""

from quality_lifecycle.config.lifecycle_config import (
    DEFAULT_LIFECYCLE_CONFIG,
    TEST_LIFECYCLE_CONFIG,
    LifecycleConfig,
)

__all__ = [
    "LifecycleConfig",
    "DEFAULT_LIFECYCLE_CONFIG",
    "TEST_LIFECYCLE_CONFIG",
]

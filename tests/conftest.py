"""
Pytest configuration and shared fixtures for quality lifecycle tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Prefer the in-memory stubs in quality_lifecycle.infrastructure.stubs to mocks
- Unit tests go in tests/unit/
"""

from datetime import datetime, timezone

import pytest

from tests.helpers import FakeTimeAuthority


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 2026-05-01T09:00:00Z."""
    return FakeTimeAuthority(frozen_at=datetime(2026, 5, 1, 9, 0, tzinfo=timezone.utc))

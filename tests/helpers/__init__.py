"""Test helpers for quality lifecycle tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_record: QualityRecord builder

Usage:
    from tests.helpers import FakeTimeAuthority, make_record
"""

from tests.helpers.fake_time_authority import FakeTimeAuthority
from tests.helpers.records import CREATED_AT, make_record

__all__ = ["CREATED_AT", "FakeTimeAuthority", "make_record"]

"""Unit tests for bootstrap wiring."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from quality_lifecycle.application.services import SystemTimeAuthority
from quality_lifecycle.bootstrap import lifecycle as bootstrap
from quality_lifecycle.bootstrap.logging import configure_structlog
from quality_lifecycle.domain.models import NCRStatus, RecordKind
from quality_lifecycle.infrastructure.stubs import (
    AllowListApprovalGate,
    InMemoryAuditTrail,
    InMemoryEventSink,
    InMemoryRecordStore,
)
from tests.helpers import FakeTimeAuthority, make_record


@pytest.fixture(autouse=True)
def reset_bootstrap() -> Iterator[None]:
    """Start and end every test with no singletons."""
    bootstrap.reset_lifecycle_dependencies()
    yield
    bootstrap.reset_lifecycle_dependencies()


class TestDefaults:
    """Lazily created collaborators."""

    def test_defaults_are_in_memory(self) -> None:
        """Without configuration the stubs are used."""
        assert isinstance(bootstrap.get_record_store(), InMemoryRecordStore)
        assert isinstance(bootstrap.get_event_sink(), InMemoryAuditTrail)
        assert isinstance(bootstrap.get_time_authority(), SystemTimeAuthority)
        assert bootstrap.get_approval_gate() is None

    def test_singletons_are_reused(self) -> None:
        """Repeated calls return the same instances."""
        assert bootstrap.get_record_store() is bootstrap.get_record_store()
        assert (
            bootstrap.get_status_update_orchestrator()
            is bootstrap.get_status_update_orchestrator()
        )
        assert bootstrap.get_lifecycle_query_service() is bootstrap.get_lifecycle_query_service()

    def test_config_read_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Config is read once from the environment."""
        monkeypatch.setenv("LIFECYCLE_MAX_COMMENT_LENGTH", "42")

        assert bootstrap.get_lifecycle_config().max_comment_length == 42


class TestOverrides:
    """set_* replaces collaborators and rebuilds dependents."""

    def test_set_record_store_rebuilds_services(self) -> None:
        """Services built before the override are dropped."""
        before = bootstrap.get_status_update_orchestrator()
        query_before = bootstrap.get_lifecycle_query_service()

        bootstrap.set_record_store(InMemoryRecordStore())

        assert bootstrap.get_status_update_orchestrator() is not before
        assert bootstrap.get_lifecycle_query_service() is not query_before

    def test_set_approval_gate(self) -> None:
        """The gate can be installed and removed."""
        gate = AllowListApprovalGate(["chair"])

        bootstrap.set_approval_gate(gate)
        assert bootstrap.get_approval_gate() is gate

        bootstrap.set_approval_gate(None)
        assert bootstrap.get_approval_gate() is None

    async def test_wired_orchestrator_uses_overrides(self) -> None:
        """The orchestrator writes to the configured store and sink."""
        store, sink = InMemoryRecordStore(), InMemoryEventSink()
        clock = FakeTimeAuthority()
        bootstrap.set_record_store(store)
        bootstrap.set_event_sink(sink)
        bootstrap.set_time_authority(clock)
        record = make_record(RecordKind.NCR, NCRStatus.DRAFT)
        await store.save(record)

        result = await bootstrap.get_status_update_orchestrator().apply(
            record, "open", None, "inspector"
        )
        view = await bootstrap.get_lifecycle_query_service().get_lifecycle_view(record.id)

        assert result.success
        assert sink.events[0].timestamp == clock.now()
        assert view.status == "open"


class TestBootstrapLogging:
    """Logging bootstrap."""

    def test_configure_structlog_uses_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The configured log environment selects the renderer."""
        monkeypatch.setenv("LIFECYCLE_LOG_ENVIRONMENT", "development")

        configure_structlog()

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        structlog.reset_defaults()

    def test_explicit_environment_wins(self) -> None:
        """An explicit environment overrides the config."""
        configure_structlog("production")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        structlog.reset_defaults()

"""
Unit Tests for the Security Event Log
=====================================
"""

from dataclasses import FrozenInstanceError

import pytest

from authsec_core.events import EventLog, SecurityEventKind, Severity


class TestEventLogAppend:
    """Appending and identifying events."""

    def test_append_returns_unique_ids(self, clock):
        """Should return a distinct id for each append."""
        log = EventLog(clock=clock)

        ids = [log.append("otp_expired", "low") for _ in range(50)]

        assert len(set(ids)) == 50
        assert ids == sorted(ids)

    def test_event_fields(self, clock):
        """Should store the given fields with a timestamp from the clock."""
        log = EventLog(clock=clock)

        event_id = log.append(
            SecurityEventKind.MULTIPLE_ATTEMPTS,
            Severity.MEDIUM,
            user_id="user_123",
            details={"attempts": 4, "timespan": 300},
        )
        event = log.all()[0]

        assert event.id == event_id
        assert event.kind is SecurityEventKind.MULTIPLE_ATTEMPTS
        assert event.severity is Severity.MEDIUM
        assert event.user_id == "user_123"
        assert event.timestamp == clock.now
        assert dict(event.details) == {"attempts": 4, "timespan": 300}

    def test_events_are_immutable(self, clock):
        """Should refuse changes to a stored event or its details."""
        log = EventLog(clock=clock)
        details = {"reason": "timeout"}
        log.append("otp_expired", "low", details=details)
        event = log.all()[0]

        with pytest.raises(FrozenInstanceError):
            event.severity = Severity.CRITICAL
        with pytest.raises(TypeError):
            event.details["reason"] = "changed"

        details["reason"] = "changed"
        assert event.details["reason"] == "timeout"

    def test_unknown_kind_rejected(self):
        """Should reject an unknown event kind."""
        log = EventLog()
        with pytest.raises(ValueError):
            log.append("brute_force", "low")
        with pytest.raises(ValueError):
            log.append("otp_expired", "severe")
        assert len(log) == 0

    def test_ids_survive_clear(self):
        """Should keep issuing fresh ids after a clear."""
        log = EventLog()
        first = log.append("otp_reused", "high")
        log.clear()
        second = log.append("otp_reused", "high")

        assert first != second
        assert len(log) == 1


class TestEventLogRetention:
    """Capacity bound and FIFO eviction."""

    def test_capacity_bound_evicts_oldest(self):
        """Should evict the oldest events beyond capacity."""
        log = EventLog()

        ids = [log.append("otp_expired", "low", details={"n": i}) for i in range(1001)]
        kept = log.all()

        assert len(kept) == 1000
        assert [e.id for e in kept] == ids[1:]
        assert ids[0] not in {e.id for e in kept}

    def test_small_capacity(self):
        """Should keep only the newest events at a small capacity."""
        log = EventLog(capacity=3)
        for i in range(5):
            log.append("otp_expired", "low", details={"n": i})

        assert [e.details["n"] for e in log.all()] == [2, 3, 4]

    def test_invalid_capacity(self):
        """Should reject a capacity below one."""
        with pytest.raises(ValueError):
            EventLog(capacity=0)


class TestEventLogWindow:
    """Time-window queries."""

    def test_recent_filters_by_age(self, clock):
        """Should return only events inside the window."""
        log = EventLog(clock=clock)
        log.append("otp_expired", "low", details={"n": "old"})
        clock.advance(hours=23)
        log.append("otp_expired", "low", details={"n": "mid"})
        clock.advance(hours=2)
        log.append("otp_expired", "low", details={"n": "new"})

        recent = log.recent(24)

        assert [e.details["n"] for e in recent] == ["mid", "new"]

    def test_window_boundary_is_exclusive(self, clock):
        """Should exclude an event exactly at the window edge."""
        log = EventLog(clock=clock)
        log.append("otp_expired", "low")
        clock.advance(hours=24)

        assert log.recent(24) == []

    def test_recent_keeps_insertion_order(self, clock):
        """Should return recent events oldest first."""
        log = EventLog(clock=clock)
        for i in range(5):
            log.append("otp_expired", "low", details={"n": i})
            clock.advance(minutes=1)

        assert [e.details["n"] for e in log.recent(1)] == [0, 1, 2, 3, 4]


class TestCriticalHook:
    """Critical events notify the hook after they are stored."""

    def test_hook_called_for_critical_only(self):
        """Should call the hook for critical events only."""
        seen = []
        log = EventLog(on_critical=seen.append)

        log.append("otp_expired", "high")
        event_id = log.append("otp_reused", "critical")

        assert [e.id for e in seen] == [event_id]

    def test_event_is_stored_before_hook_runs(self):
        """Should store the event before the hook sees it."""
        log = EventLog()
        observed = []
        log.set_critical_hook(lambda e: observed.append(len(log)))

        log.append("suspicious_activity", "critical")

        assert observed == [1]

    def test_hook_failure_does_not_fail_append(self):
        """Should log a failing hook and still return the id."""
        def broken(event):
            raise RuntimeError("boom")

        log = EventLog(on_critical=broken)

        event_id = log.append("suspicious_activity", "critical")

        assert event_id.startswith("SEC_")
        assert len(log) == 1

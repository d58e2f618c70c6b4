"""
Unit Tests for Metrics and Scoring
==================================
"""

import threading

import pytest

from authsec_core.events import EventLog
from authsec_core.events.models import SecurityEvent, SecurityEventKind, Severity
from authsec_core.metrics import MetricsStore, ScoringEngine, SecurityMetrics


def event(severity: Severity, clock) -> SecurityEvent:
    return SecurityEvent(
        id="SEC_test",
        kind=SecurityEventKind.SUSPICIOUS_ACTIVITY,
        severity=severity,
        timestamp=clock(),
        details={},
    )


class TestScoringEngine:
    """Security score computation."""

    def test_example_score(self):
        """Should reproduce the documented example score."""
        metrics = SecurityMetrics(
            total_generated=100,
            total_expired=25,
            total_failed=0,
            average_usage_time_seconds=100,
            expiration_rate_percent=25.0,
        )
        assert ScoringEngine().compute(metrics, []) == 85

    def test_expiration_bands(self):
        """Should apply the expiration penalty bands at their thresholds."""
        engine = ScoringEngine()
        slow = dict(average_usage_time_seconds=200)

        assert engine.compute(SecurityMetrics(expiration_rate_percent=15.0, **slow), []) == 100
        assert engine.compute(SecurityMetrics(expiration_rate_percent=16.0, **slow), []) == 90
        assert engine.compute(SecurityMetrics(expiration_rate_percent=20.0, **slow), []) == 90
        assert engine.compute(SecurityMetrics(expiration_rate_percent=21.0, **slow), []) == 80

    def test_failure_bands(self):
        """Should apply the failure penalty bands at their thresholds."""
        engine = ScoringEngine()

        def score(failed):
            return engine.compute(
                SecurityMetrics(total_generated=100, total_failed=failed, average_usage_time_seconds=200),
                [],
            )

        assert score(5) == 100
        assert score(6) == 95
        assert score(10) == 95
        assert score(11) == 85

    def test_no_failure_penalty_without_generated(self):
        """Should skip the failure penalty when nothing was generated."""
        metrics = SecurityMetrics(total_failed=50, average_usage_time_seconds=200)
        assert ScoringEngine().compute(metrics, []) == 100

    def test_event_penalties(self, clock):
        """Should subtract per-event penalties by severity."""
        metrics = SecurityMetrics(average_usage_time_seconds=200)
        events = [
            event(Severity.CRITICAL, clock),
            event(Severity.HIGH, clock),
            event(Severity.HIGH, clock),
            event(Severity.MEDIUM, clock),
            event(Severity.LOW, clock),
        ]
        assert ScoringEngine().compute(metrics, events) == 80

    def test_clamped_to_range(self, clock):
        """Should clamp the score to 0..100."""
        engine = ScoringEngine()
        many_critical = [event(Severity.CRITICAL, clock) for _ in range(20)]

        assert engine.compute(SecurityMetrics(), many_critical) == 0
        assert engine.compute(SecurityMetrics(average_usage_time_seconds=10), []) == 100


class TestMetricsStore:
    """Merge-and-recompute semantics."""

    def test_expiration_rate_recomputed(self):
        """Should recompute the expiration rate on every update."""
        store = MetricsStore(EventLog())

        store.update({"total_generated": 100, "total_expired": 25})

        assert store.snapshot().expiration_rate_percent == 25.0

    def test_update_refreshes_score(self):
        """Should refresh the score after an update."""
        store = MetricsStore(EventLog())

        snapshot = store.update(
            total_generated=100,
            total_expired=25,
            total_failed=0,
            average_usage_time_seconds=100,
        )

        assert snapshot.security_score == 85

    def test_rate_zero_without_generated(self):
        """Should report a zero rate when nothing was generated."""
        store = MetricsStore(EventLog())
        store.update(total_expired=3)

        assert store.snapshot().expiration_rate_percent == 0.0

    def test_score_counts_recent_events(self, clock):
        """Should include recent events in the recomputed score."""
        log = EventLog(clock=clock)
        store = MetricsStore(log)
        log.append("otp_reused", "critical")
        log.append("multiple_attempts", "high")

        # 100 + 5 (fast usage) - 10 - 5
        assert store.update(total_generated=1).security_score == 90

        clock.advance(hours=25)
        assert store.update(total_generated=2).security_score == 100

    def test_snapshot_is_a_copy(self):
        """Should return snapshots that do not alias the live metrics."""
        store = MetricsStore(EventLog())
        store.update(total_generated=10)

        snapshot = store.snapshot()
        snapshot.total_generated = 999
        snapshot.security_score = 0

        again = store.snapshot()
        assert again.total_generated == 10
        assert again.security_score != 0

    def test_reset_restores_defaults(self):
        """Should restore default metrics on reset."""
        store = MetricsStore(EventLog())
        store.update(total_generated=10, total_expired=5, total_failed=3)

        store.reset()

        assert store.snapshot() == SecurityMetrics()
        assert store.snapshot().security_score == 85

    def test_reset_with_events_clears_both(self):
        """Should empty the event log along with the metrics when asked."""
        log = EventLog()
        log.append("otp_expired", "low")
        store = MetricsStore(log)
        store.update(total_generated=4)

        store.reset(clear_events=True)

        assert store.snapshot() == SecurityMetrics()
        assert len(log) == 0

    def test_reset_keeps_events_by_default(self):
        """Should leave the event log alone on a plain reset."""
        log = EventLog()
        log.append("otp_expired", "low")
        store = MetricsStore(log)

        store.reset()

        assert len(log) == 1

    def test_snapshot_with_events(self, clock):
        """Should return the metrics together with events inside the window."""
        log = EventLog(clock=clock)
        log.append("otp_expired", "low")
        clock.advance(hours=30)
        log.append("otp_reused", "critical")
        store = MetricsStore(log)
        store.update(total_generated=2)

        metrics, events = store.snapshot_with_events(24)

        assert metrics.total_generated == 2
        assert [e.kind.value for e in events] == ["otp_reused"]

    def test_unknown_field_rejected(self):
        """Should reject an unknown metric field."""
        store = MetricsStore(EventLog())
        with pytest.raises(ValueError):
            store.update(total_sent=1)

    def test_negative_counter_rejected(self):
        """Should reject a negative counter without changing state."""
        store = MetricsStore(EventLog())
        with pytest.raises(ValueError):
            store.update(total_failed=-1)
        assert store.snapshot() == SecurityMetrics()

    def test_concurrent_increments_are_not_lost(self):
        """Should not lose increments applied from several threads."""
        store = MetricsStore(EventLog())

        def work():
            for _ in range(500):
                store.apply(lambda m: {"total_generated": m.total_generated + 1})

        threads = [threading.Thread(target=work) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert store.snapshot().total_generated == 4000

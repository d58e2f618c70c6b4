"""
Security Metrics Store
======================
Owns the single live SecurityMetrics instance for an engine.
"""

import threading
from dataclasses import replace
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

import structlog

from ..events.log import EventLog
from ..events.models import SecurityEvent
from .models import SecurityMetrics, COUNTER_FIELDS, METRIC_FIELDS
from .scoring import ScoringEngine

logger = structlog.get_logger(__name__)

SCORING_WINDOW_HOURS = 24

Mutator = Callable[[SecurityMetrics], Mapping[str, Any]]


class MetricsStore:
    """
    Holds cumulative OTP metrics.

    Every mutation is a merge followed by recomputation of the derived
    fields, done as one critical section.
    """

    def __init__(self, event_log: EventLog, scoring: Optional[ScoringEngine] = None):
        self._event_log = event_log
        self._scoring = scoring or ScoringEngine()
        self._metrics = SecurityMetrics()
        self._lock = threading.Lock()

    def update(self, partial: Optional[Mapping[str, Any]] = None, **fields: Any) -> SecurityMetrics:
        """
        Merge fields into the metrics and recompute derived values.

        Args:
            partial: Mapping of field name to new value
            **fields: Same, as keyword arguments

        Returns:
            Snapshot after the update
        """
        merged = dict(partial or {})
        merged.update(fields)
        return self.apply(lambda _current: merged)

    def apply(self, mutator: Mutator) -> SecurityMetrics:
        """
        Compute a partial update from the current state and merge it.

        The mutator receives a snapshot and runs inside the lock, so
        increments and running averages cannot interleave.
        """
        with self._lock:
            partial = dict(mutator(replace(self._metrics)))
            self._check_fields(partial)

            merged = replace(self._metrics, **partial)
            merged.expiration_rate_percent = self._expiration_rate(merged)
            merged.security_score = self._scoring.compute(
                merged, self._event_log.recent(SCORING_WINDOW_HOURS)
            )
            self._metrics = merged
            snapshot = replace(merged)

        logger.debug(
            "otp_metrics_updated",
            fields=sorted(partial),
            security_score=snapshot.security_score,
        )
        return snapshot

    def snapshot(self) -> SecurityMetrics:
        """Independent copy of the current metrics."""
        with self._lock:
            return replace(self._metrics)

    def snapshot_with_events(self, hours_back: float) -> Tuple[SecurityMetrics, List[SecurityEvent]]:
        """Metrics and the events of the last hours_back hours, read as one unit."""
        with self._lock:
            return replace(self._metrics), self._event_log.recent(hours_back)

    def reset(self, clear_events: bool = False) -> None:
        """
        Restore default metrics.

        With clear_events the event log is emptied inside the same critical
        section, so no reader sees fresh metrics next to stale events.
        """
        with self._lock:
            if clear_events:
                self._event_log.clear()
            self._metrics = SecurityMetrics()
        logger.info("otp_metrics_reset", events_cleared=clear_events)

    @staticmethod
    def _expiration_rate(metrics: SecurityMetrics) -> float:
        if metrics.total_generated <= 0:
            return 0.0
        rate = metrics.total_expired / metrics.total_generated * 100
        return min(100.0, rate)

    @staticmethod
    def _check_fields(partial: Dict[str, Any]) -> None:
        unknown = set(partial) - METRIC_FIELDS
        if unknown:
            raise ValueError(f"Unknown metric fields: {', '.join(sorted(unknown))}")
        for name in COUNTER_FIELDS & set(partial):
            value = partial[name]
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer")
        usage = partial.get("average_usage_time_seconds")
        if usage is not None and usage < 0:
            raise ValueError("average_usage_time_seconds cannot be negative")

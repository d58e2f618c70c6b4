"""
Security Event Log
==================
Bounded, append-only, in-memory log of security events.
"""

import itertools
import threading
from collections import deque
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Deque, Dict, List, Optional, Union

import structlog

from .models import SecurityEvent, SecurityEventKind, Severity

logger = structlog.get_logger(__name__)

DEFAULT_CAPACITY = 1000

Clock = Callable[[], datetime]
CriticalHook = Callable[[SecurityEvent], None]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EventLog:
    """
    Insertion-ordered event buffer with FIFO eviction.

    The log is the only writer of its events. Once the capacity is reached,
    every append evicts the oldest entry. Events cannot be removed
    individually; `clear` drops everything.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        on_critical: Optional[CriticalHook] = None,
        clock: Clock = utc_now,
    ):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._events: Deque[SecurityEvent] = deque(maxlen=capacity)
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()
        self._on_critical = on_critical
        self._clock = clock

    def set_critical_hook(self, hook: Optional[CriticalHook]) -> None:
        self._on_critical = hook

    def append(
        self,
        kind: Union[SecurityEventKind, str],
        severity: Union[Severity, str],
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> str:
        """
        Record a security event.

        Args:
            kind: Event kind
            severity: Event severity
            user_id: Affected user, if any
            details: Free-form event context

        Returns:
            The new event's id
        """
        kind = SecurityEventKind(kind)
        severity = Severity(severity)

        with self._lock:
            event = SecurityEvent(
                id=f"SEC_{next(self._sequence):08d}",
                kind=kind,
                severity=severity,
                timestamp=self._clock(),
                details=details or {},
                user_id=user_id,
            )
            evicting = len(self._events) == self.capacity
            self._events.append(event)

        if evicting:
            logger.debug("security_event_evicted", capacity=self.capacity)

        logger.info(
            "security_event_logged",
            event_id=event.id,
            kind=kind.value,
            severity=severity.value,
            user_id=user_id,
        )

        if event.is_critical and self._on_critical is not None:
            try:
                self._on_critical(event)
            except Exception:
                logger.exception("critical_event_hook_failed", event_id=event.id)

        return event.id

    def recent(self, hours_back: float) -> List[SecurityEvent]:
        """Events newer than `hours_back` hours, oldest first."""
        cutoff = self._clock() - timedelta(hours=hours_back)
        with self._lock:
            return [e for e in self._events if e.timestamp > cutoff]

    def all(self) -> List[SecurityEvent]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()
        logger.info("security_event_log_cleared")

    def __len__(self) -> int:
        with self._lock:
            return len(self._events)

"""
Security Events
===============
Event types and the bounded event log.
"""

from .models import SecurityEventKind, Severity, SecurityEvent
from .log import EventLog, DEFAULT_CAPACITY, utc_now

__all__ = [
    "SecurityEventKind",
    "Severity",
    "SecurityEvent",
    "EventLog",
    "DEFAULT_CAPACITY",
    "utc_now",
]

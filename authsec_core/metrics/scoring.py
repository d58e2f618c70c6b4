"""
Security Score Engine
=====================
Derives the 0-100 security score from metrics and recent events.
"""

from typing import Iterable

from ..events.models import SecurityEvent, Severity
from .models import SecurityMetrics


class ScoringEngine:
    """
    Computes the security score.

    Scoring Logic (base: 100 points, range 0-100):

    - Expiration rate > 20%: -20, else > 15%: -10
    - Failure rate > 10%: -15, else > 5%: -5
    - Average usage time < 120s: +5
    - Each critical event in the window: -10
    - Each high event in the window: -5

    Terms are additive; clamping at the end is the only nonlinearity.
    """

    BASE_SCORE = 100

    HIGH_EXPIRATION_RATE = 20.0
    ELEVATED_EXPIRATION_RATE = 15.0
    HIGH_FAILURE_RATE = 10.0
    ELEVATED_FAILURE_RATE = 5.0
    FAST_USAGE_SECONDS = 120.0

    CRITICAL_EVENT_PENALTY = 10
    HIGH_EVENT_PENALTY = 5

    def compute(self, metrics: SecurityMetrics, recent_events: Iterable[SecurityEvent]) -> int:
        score = self.BASE_SCORE

        if metrics.expiration_rate_percent > self.HIGH_EXPIRATION_RATE:
            score -= 20
        elif metrics.expiration_rate_percent > self.ELEVATED_EXPIRATION_RATE:
            score -= 10

        failure_rate = metrics.failure_rate_percent
        if failure_rate > self.HIGH_FAILURE_RATE:
            score -= 15
        elif failure_rate > self.ELEVATED_FAILURE_RATE:
            score -= 5

        if metrics.average_usage_time_seconds < self.FAST_USAGE_SECONDS:
            score += 5

        critical = 0
        high = 0
        for event in recent_events:
            if event.severity == Severity.CRITICAL:
                critical += 1
            elif event.severity == Severity.HIGH:
                high += 1
        score -= critical * self.CRITICAL_EVENT_PENALTY + high * self.HIGH_EVENT_PENALTY

        return int(max(0, min(100, score)))

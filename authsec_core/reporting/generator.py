"""
Security Report Generator
=========================
Turns metrics and recent events into a report with recommendations.
"""

from typing import List, Sequence

import structlog

from ..events.log import EventLog
from ..events.models import SecurityEvent, Severity
from ..metrics.models import SecurityMetrics
from .models import ReportStatus, SecurityReport

logger = structlog.get_logger(__name__)

REPORT_WINDOW_HOURS = 24


class ReportGenerator:
    """
    Builds security reports.

    Rules run in a fixed order. Each may add a recommendation and raise the
    status; the most severe status wins and is never lowered.
    """

    HIGH_EXPIRATION_RATE = 20.0
    LOW_SECURITY_SCORE = 70
    SLOW_USAGE_SECONDS = 480.0

    def generate(self, metrics: SecurityMetrics, event_log: EventLog) -> SecurityReport:
        return self.build(metrics, event_log.recent(REPORT_WINDOW_HOURS))

    def build(self, metrics: SecurityMetrics, recent_events: Sequence[SecurityEvent]) -> SecurityReport:
        """Report from metrics and events already restricted to the report window."""
        recent_events = list(recent_events)
        recommendations: List[str] = []
        status = ReportStatus.SECURE

        if metrics.expiration_rate_percent > self.HIGH_EXPIRATION_RATE:
            recommendations.append(
                "High OTP expiration rate - review the OTP validity duration"
            )
            status = status.escalate(ReportStatus.WARNING)

        if metrics.security_score < self.LOW_SECURITY_SCORE:
            recommendations.append(
                "Low security score - revise the authentication configuration"
            )
            status = status.escalate(ReportStatus.CRITICAL)

        critical_count = sum(1 for e in recent_events if e.severity == Severity.CRITICAL)
        if critical_count > 0:
            recommendations.append(
                f"{critical_count} critical event(s) detected - investigation required"
            )
            status = status.escalate(ReportStatus.CRITICAL)

        if metrics.average_usage_time_seconds > self.SLOW_USAGE_SECONDS:
            recommendations.append(
                "Long OTP usage time - consider reducing the OTP expiry"
            )

        if not recommendations:
            recommendations.append("Security configuration optimal")

        logger.info(
            "security_report_generated",
            status=status.value,
            recent_events=len(recent_events),
            recommendations=len(recommendations),
        )

        return SecurityReport(
            summary=metrics,
            recent_events=recent_events,
            recommendations=recommendations,
            status=status,
        )

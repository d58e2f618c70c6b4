"""
Report Models
=============
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List

from ..events.models import SecurityEvent
from ..metrics.models import SecurityMetrics


class ReportStatus(str, Enum):
    """Overall posture, ordered secure < warning < critical."""
    SECURE = "secure"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]

    def escalate(self, other: "ReportStatus") -> "ReportStatus":
        """The more severe of the two statuses."""
        return other if other.rank > self.rank else self


_STATUS_RANK = {
    ReportStatus.SECURE: 0,
    ReportStatus.WARNING: 1,
    ReportStatus.CRITICAL: 2,
}


@dataclass
class SecurityReport:
    """Point-in-time security report."""
    summary: SecurityMetrics
    recent_events: List[SecurityEvent]
    recommendations: List[str]
    status: ReportStatus
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary.to_dict(),
            "recent_events": [e.to_dict() for e in self.recent_events],
            "recommendations": list(self.recommendations),
            "status": self.status.value,
            "generated_at": self.generated_at.isoformat(),
        }

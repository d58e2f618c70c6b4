"""
Security Metrics Models
=======================
Cumulative OTP lifecycle counters and derived rates.
"""

from dataclasses import dataclass, asdict, fields
from typing import Any, Dict, FrozenSet

DEFAULT_SECURITY_SCORE = 85


@dataclass
class SecurityMetrics:
    """Rolling OTP security metrics."""
    total_generated: int = 0
    total_expired: int = 0
    total_success: int = 0
    total_failed: int = 0
    average_usage_time_seconds: float = 0.0
    expiration_rate_percent: float = 0.0    # 0-100
    security_score: int = DEFAULT_SECURITY_SCORE  # 0-100

    @property
    def failure_rate_percent(self) -> float:
        if self.total_generated <= 0:
            return 0.0
        return self.total_failed / self.total_generated * 100

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


COUNTER_FIELDS: FrozenSet[str] = frozenset({
    "total_generated",
    "total_expired",
    "total_success",
    "total_failed",
})

METRIC_FIELDS: FrozenSet[str] = frozenset(f.name for f in fields(SecurityMetrics))

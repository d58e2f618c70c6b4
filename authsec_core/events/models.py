"""
Security Event Models
=====================
Immutable security events and their classifications.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class SecurityEventKind(str, Enum):
    """Kinds of security-relevant OTP events."""
    OTP_EXPIRED = "otp_expired"
    OTP_REUSED = "otp_reused"
    MULTIPLE_ATTEMPTS = "multiple_attempts"
    SUSPICIOUS_ACTIVITY = "suspicious_activity"


class Severity(str, Enum):
    """Event severity, ordered low < medium < high < critical."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    @property
    def rank(self) -> int:
        return _SEVERITY_RANK[self]


_SEVERITY_RANK = {
    Severity.LOW: 0,
    Severity.MEDIUM: 1,
    Severity.HIGH: 2,
    Severity.CRITICAL: 3,
}


@dataclass(frozen=True)
class SecurityEvent:
    """A logged security event. Never mutated after creation."""
    id: str
    kind: SecurityEventKind
    severity: Severity
    timestamp: datetime
    details: Mapping[str, Any]
    user_id: Optional[str] = None

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "kind": self.kind.value,
            "severity": self.severity.value,
            "user_id": self.user_id,
            "timestamp": self.timestamp.isoformat(),
            "details": dict(self.details),
        }

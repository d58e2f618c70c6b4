"""
Compliance Models
=================
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import BaseModel, Field


class ExternalAuthSettings(BaseModel):
    """Auth settings as reported by the identity provider."""
    otp_expiry_seconds: int = Field(gt=0)
    session_timeout_seconds: int = Field(gt=0)


@dataclass
class ComplianceResult:
    """Outcome of comparing the identity provider against policy."""
    is_compliant: bool
    issues: List[str] = field(default_factory=list)
    recommendations: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_compliant": self.is_compliant,
            "issues": list(self.issues),
            "recommendations": list(self.recommendations),
        }

"""
Policy Models
=============
OTP configuration and validation result types.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List

from ..errors import ConfigurationError


# Policy thresholds (seconds)
MIN_EXPIRY = 300            # 5 minutes
RECOMMENDED_EXPIRY = 600    # 10 minutes
MAX_EXPIRY = 3600           # 1 hour

MAX_RECOMMENDED_ATTEMPTS = 5
MIN_RECOMMENDED_ATTEMPTS = 3
MIN_RESEND_DELAY = 60

SESSION_TIMEOUT_WARNING = 43200  # 12 hours


class OTPChannel(str, Enum):
    """OTP delivery channels."""
    EMAIL = "email"
    SMS = "sms"
    PHONE = "phone"


@dataclass(frozen=True)
class OTPConfig:
    """A proposed OTP configuration."""
    expiry_seconds: int
    max_attempts: int
    resend_delay_seconds: int
    channel: OTPChannel

    def __post_init__(self):
        if self.expiry_seconds <= 0:
            raise ValueError("expiry_seconds must be positive")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.resend_delay_seconds < 0:
            raise ValueError("resend_delay_seconds cannot be negative")
        if not isinstance(self.channel, OTPChannel):
            object.__setattr__(self, "channel", OTPChannel(self.channel))

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["channel"] = self.channel.value
        return d


@dataclass
class ValidationResult:
    """Outcome of checking an OTPConfig against policy."""
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise ConfigurationError if any hard threshold was broken."""
        if self.errors:
            raise ConfigurationError(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_valid": self.is_valid,
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }

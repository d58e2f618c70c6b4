"""
Engine Configuration
====================
Environment-driven settings for the security engine.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


def _env_int(name: str, default: int) -> int:
    return int(os.environ.get(name, default))


def _env_float(name: str, default: float) -> float:
    return float(os.environ.get(name, default))


def _env_optional(name: str) -> Optional[str]:
    return os.environ.get(name) or None


@dataclass
class AuthSecSettings:
    """Runtime settings, read from the environment when constructed."""
    service_name: str = field(
        default_factory=lambda: os.environ.get("AUTHSEC_SERVICE_NAME", "qwonen-authsec")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("AUTHSEC_LOG_LEVEL", "INFO")
    )
    event_log_capacity: int = field(
        default_factory=lambda: _env_int("AUTHSEC_EVENT_LOG_CAPACITY", 1000)
    )
    compliance_timeout: float = field(
        default_factory=lambda: _env_float("AUTHSEC_COMPLIANCE_TIMEOUT", 10.0)
    )
    idp_base_url: Optional[str] = field(
        default_factory=lambda: _env_optional("AUTHSEC_IDP_BASE_URL")
    )
    idp_api_key: Optional[str] = field(
        default_factory=lambda: _env_optional("AUTHSEC_IDP_API_KEY")
    )
    alert_webhook_url: Optional[str] = field(
        default_factory=lambda: _env_optional("AUTHSEC_ALERT_WEBHOOK_URL")
    )
    http_timeout: float = 10.0

    def __post_init__(self):
        if self.event_log_capacity < 1:
            raise ValueError("event_log_capacity must be at least 1")
        if self.compliance_timeout <= 0:
            raise ValueError("compliance_timeout must be positive")

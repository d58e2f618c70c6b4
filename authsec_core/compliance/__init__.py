"""
Identity Provider Compliance
============================
"""

from .models import ComplianceResult, ExternalAuthSettings
from .provider import IdentityProvider, StaticIdentityProvider, HttpIdentityProvider
from .checker import ComplianceChecker, UNVERIFIED_ISSUE, UNVERIFIED_RECOMMENDATION

__all__ = [
    "ComplianceResult",
    "ExternalAuthSettings",
    "IdentityProvider",
    "StaticIdentityProvider",
    "HttpIdentityProvider",
    "ComplianceChecker",
    "UNVERIFIED_ISSUE",
    "UNVERIFIED_RECOMMENDATION",
]

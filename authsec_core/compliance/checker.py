"""
Compliance Checker
==================
Compares the identity provider's live configuration against policy.
"""

import asyncio

import structlog

from ..events.log import EventLog
from ..events.models import SecurityEventKind, Severity
from ..policy.models import MAX_EXPIRY, RECOMMENDED_EXPIRY, SESSION_TIMEOUT_WARNING
from .models import ComplianceResult, ExternalAuthSettings
from .provider import IdentityProvider

logger = structlog.get_logger(__name__)

UNVERIFIED_ISSUE = "Unable to verify identity provider configuration"
UNVERIFIED_RECOMMENDATION = "Check connectivity and API permissions for the identity provider"


class ComplianceChecker:
    """
    Checks the identity provider against the OTP policy.

    A completed check logs exactly one suspicious_activity event (high when
    issues were found, low otherwise). An unreachable provider, a timeout or
    a cancelled fetch yields a non-compliant result instead of an exception.
    """

    def __init__(self, provider: IdentityProvider, event_log: EventLog, timeout: float = 10.0):
        self.provider = provider
        self.event_log = event_log
        self.timeout = timeout

    async def check(self) -> ComplianceResult:
        try:
            settings = await asyncio.wait_for(self.provider.fetch_settings(), timeout=self.timeout)
        except asyncio.TimeoutError:
            return self._unverified("timeout")
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            return self._unverified("cancelled")
        except Exception as e:
            return self._unverified(str(e))

        result = self.evaluate(settings)

        self.event_log.append(
            SecurityEventKind.SUSPICIOUS_ACTIVITY,
            Severity.HIGH if result.issues else Severity.LOW,
            details={
                "issues": len(result.issues),
                "otp_expiry": settings.otp_expiry_seconds,
                "session_timeout": settings.session_timeout_seconds,
            },
        )

        logger.info(
            "compliance_check_completed",
            provider=getattr(self.provider, "name", "unknown"),
            compliant=result.is_compliant,
            issues=len(result.issues),
        )
        return result

    @staticmethod
    def evaluate(settings: ExternalAuthSettings) -> ComplianceResult:
        """Pure comparison of provider settings against policy constants."""
        issues = []
        recommendations = []

        if settings.otp_expiry_seconds > MAX_EXPIRY:
            issues.append(
                f"Insecure OTP configuration: {settings.otp_expiry_seconds}s "
                f"(max: {MAX_EXPIRY}s)"
            )
            recommendations.append(
                f"Reduce the identity provider's OTP expiry to {RECOMMENDED_EXPIRY}s"
            )

        if settings.session_timeout_seconds > SESSION_TIMEOUT_WARNING:
            recommendations.append(
                "Long session timeout - consider reducing it to improve security"
            )

        return ComplianceResult(
            is_compliant=not issues,
            issues=issues,
            recommendations=recommendations,
        )

    def _unverified(self, reason: str) -> ComplianceResult:
        logger.warning(
            "compliance_check_failed",
            provider=getattr(self.provider, "name", "unknown"),
            reason=reason,
        )
        return ComplianceResult(
            is_compliant=False,
            issues=[UNVERIFIED_ISSUE],
            recommendations=[UNVERIFIED_RECOMMENDATION],
        )

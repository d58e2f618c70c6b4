"""
Auth Security Engine
====================
The in-process contract used by the authentication flow and admin surfaces.

There is no module-level instance. The application's composition root builds
one engine and hands it to every collaborator:

    engine = AuthSecurityEngine(AuthSecSettings())
    engine.report_otp_generated()
    report = engine.get_report()
"""

from typing import Any, Dict, List, Optional, Union

import structlog

from .alerts import AlertChannel, AlertDispatcher, LoggingAlertChannel, WebhookAlertChannel
from .compliance import (
    ComplianceChecker,
    ComplianceResult,
    HttpIdentityProvider,
    IdentityProvider,
    StaticIdentityProvider,
)
from .config import AuthSecSettings
from .events import EventLog, SecurityEvent, SecurityEventKind, Severity, utc_now
from .events.log import Clock
from .metrics import MetricsStore, SecurityMetrics
from .policy import ConfigValidator, OTPConfig, PresetName, ValidationResult, get_preset
from .reporting import REPORT_WINDOW_HOURS, ReportGenerator, SecurityReport

logger = structlog.get_logger(__name__)


class AuthSecurityEngine:
    """Security policy and metrics engine for OTP authentication."""

    def __init__(
        self,
        settings: Optional[AuthSecSettings] = None,
        identity_provider: Optional[IdentityProvider] = None,
        alert_channel: Optional[AlertChannel] = None,
        clock: Clock = utc_now,
    ):
        self.settings = settings or AuthSecSettings()

        if alert_channel is None:
            if self.settings.alert_webhook_url:
                alert_channel = WebhookAlertChannel(
                    self.settings.alert_webhook_url,
                    timeout=self.settings.http_timeout,
                    service_name=self.settings.service_name,
                )
            else:
                alert_channel = LoggingAlertChannel()

        if identity_provider is None:
            if self.settings.idp_base_url:
                identity_provider = HttpIdentityProvider(
                    self.settings.idp_base_url,
                    api_key=self.settings.idp_api_key,
                    timeout=self.settings.http_timeout,
                )
            else:
                identity_provider = StaticIdentityProvider()

        self.alerts = AlertDispatcher(alert_channel)
        self.events = EventLog(
            capacity=self.settings.event_log_capacity,
            on_critical=self.alerts.dispatch,
            clock=clock,
        )
        self.metrics = MetricsStore(self.events)
        self.validator = ConfigValidator()
        self.reports = ReportGenerator()
        self.compliance = ComplianceChecker(
            identity_provider,
            self.events,
            timeout=self.settings.compliance_timeout,
        )

        logger.info(
            "auth_security_engine_started",
            service=self.settings.service_name,
            alert_channel=getattr(alert_channel, "name", "custom"),
            identity_provider=getattr(identity_provider, "name", "custom"),
        )

    # OTP lifecycle

    def report_otp_generated(self) -> SecurityMetrics:
        return self.metrics.apply(lambda m: {"total_generated": m.total_generated + 1})

    def report_otp_expired(self) -> SecurityMetrics:
        return self.metrics.apply(lambda m: {"total_expired": m.total_expired + 1})

    def report_otp_succeeded(self, usage_seconds: float) -> SecurityMetrics:
        """Count a successful verification and fold its usage time into the average."""
        if usage_seconds < 0:
            raise ValueError("usage_seconds cannot be negative")

        def succeed(m: SecurityMetrics) -> Dict[str, Any]:
            count = m.total_success + 1
            return {
                "total_success": count,
                "average_usage_time_seconds": (
                    m.average_usage_time_seconds * m.total_success + usage_seconds
                ) / count,
            }

        return self.metrics.apply(succeed)

    def report_otp_failed(self) -> SecurityMetrics:
        return self.metrics.apply(lambda m: {"total_failed": m.total_failed + 1})

    # Events

    def log_event(
        self,
        kind: Union[SecurityEventKind, str],
        severity: Union[Severity, str],
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> str:
        return self.events.append(kind, severity, user_id=user_id, details=details)

    def get_recent_events(self, hours_back: float = 24) -> List[SecurityEvent]:
        return self.events.recent(hours_back)

    # Policy

    def get_preset(self, name: Union[PresetName, str]) -> OTPConfig:
        return get_preset(name)

    def validate_config(self, config: OTPConfig) -> ValidationResult:
        return self.validator.validate(config)

    # Reporting

    def get_report(self) -> SecurityReport:
        metrics, recent_events = self.metrics.snapshot_with_events(REPORT_WINDOW_HOURS)
        return self.reports.build(metrics, recent_events)

    def get_metrics_snapshot(self) -> SecurityMetrics:
        return self.metrics.snapshot()

    def reset_metrics(self) -> None:
        """Administrative reset: default metrics and an empty event log, atomically."""
        self.metrics.reset(clear_events=True)
        logger.warning("auth_security_state_reset")

    async def check_compliance(self) -> ComplianceResult:
        return await self.compliance.check()

    # Lifecycle

    async def aclose(self) -> None:
        """Flush pending alerts and close owned HTTP clients."""
        await self.alerts.aclose()
        close = getattr(self.compliance.provider, "aclose", None)
        if close is not None:
            await close()

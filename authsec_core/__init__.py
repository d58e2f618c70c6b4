"""
Auth Security Core
==================
OTP security policy, metrics and compliance engine for the Qwonen
dispatch platform.
"""

__version__ = "1.0.0"

# Errors
from authsec_core.errors import (
    AuthSecError,
    InvalidPresetError,
    ConfigurationError,
    ComplianceCheckFailure,
    AlertDispatchFailure,
)

# Config & logging
from authsec_core.config import AuthSecSettings
from authsec_core.logging_config import setup_logging, setup_logging_from_settings

# Policy
from authsec_core.policy import (
    OTPChannel,
    OTPConfig,
    ValidationResult,
    ConfigValidator,
    validate_config,
    PresetName,
    get_preset,
    list_presets,
    AuthSettings,
    assess_security_level,
    secure_defaults,
)

# Events
from authsec_core.events import (
    SecurityEventKind,
    Severity,
    SecurityEvent,
    EventLog,
)

# Metrics
from authsec_core.metrics import (
    SecurityMetrics,
    ScoringEngine,
    MetricsStore,
)

# Alerts
from authsec_core.alerts import (
    AlertDispatcher,
    LoggingAlertChannel,
    WebhookAlertChannel,
)

# Reporting
from authsec_core.reporting import (
    ReportStatus,
    SecurityReport,
    ReportGenerator,
)

# Compliance
from authsec_core.compliance import (
    ComplianceResult,
    ComplianceChecker,
    StaticIdentityProvider,
    HttpIdentityProvider,
)

# Engine
from authsec_core.engine import AuthSecurityEngine

__all__ = [
    # Errors
    "AuthSecError",
    "InvalidPresetError",
    "ConfigurationError",
    "ComplianceCheckFailure",
    "AlertDispatchFailure",
    # Config & logging
    "AuthSecSettings",
    "setup_logging",
    "setup_logging_from_settings",
    # Policy
    "OTPChannel",
    "OTPConfig",
    "ValidationResult",
    "ConfigValidator",
    "validate_config",
    "PresetName",
    "get_preset",
    "list_presets",
    "AuthSettings",
    "assess_security_level",
    "secure_defaults",
    # Events
    "SecurityEventKind",
    "Severity",
    "SecurityEvent",
    "EventLog",
    # Metrics
    "SecurityMetrics",
    "ScoringEngine",
    "MetricsStore",
    # Alerts
    "AlertDispatcher",
    "LoggingAlertChannel",
    "WebhookAlertChannel",
    # Reporting
    "ReportStatus",
    "SecurityReport",
    "ReportGenerator",
    # Compliance
    "ComplianceResult",
    "ComplianceChecker",
    "StaticIdentityProvider",
    "HttpIdentityProvider",
    # Engine
    "AuthSecurityEngine",
]

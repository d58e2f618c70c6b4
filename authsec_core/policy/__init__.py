"""
OTP Policy
==========
Configuration validation, presets and settings assessment.
"""

from .models import (
    OTPChannel,
    OTPConfig,
    ValidationResult,
    MIN_EXPIRY,
    RECOMMENDED_EXPIRY,
    MAX_EXPIRY,
    SESSION_TIMEOUT_WARNING,
)
from .validator import ConfigValidator, validate_config
from .presets import PresetName, get_preset, list_presets
from .auth_settings import (
    AuthSettings,
    assess_security_score,
    assess_security_level,
    secure_defaults,
)

__all__ = [
    # Models
    "OTPChannel",
    "OTPConfig",
    "ValidationResult",
    "MIN_EXPIRY",
    "RECOMMENDED_EXPIRY",
    "MAX_EXPIRY",
    "SESSION_TIMEOUT_WARNING",
    # Validator
    "ConfigValidator",
    "validate_config",
    # Presets
    "PresetName",
    "get_preset",
    "list_presets",
    # Settings assessment
    "AuthSettings",
    "assess_security_score",
    "assess_security_level",
    "secure_defaults",
]

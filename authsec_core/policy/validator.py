"""
OTP Config Validator
====================
Checks OTP configurations against layered security thresholds.
"""

import structlog

from .models import (
    OTPConfig,
    ValidationResult,
    MIN_EXPIRY,
    RECOMMENDED_EXPIRY,
    MAX_EXPIRY,
    MAX_RECOMMENDED_ATTEMPTS,
    MIN_RECOMMENDED_ATTEMPTS,
    MIN_RESEND_DELAY,
)

logger = structlog.get_logger(__name__)


class ConfigValidator:
    """
    Validates OTP configurations.

    Every rule is evaluated; none short-circuits. Only an expiry above the
    hard maximum is an error, everything else is a warning.
    """

    def __init__(
        self,
        min_expiry: int = MIN_EXPIRY,
        recommended_expiry: int = RECOMMENDED_EXPIRY,
        max_expiry: int = MAX_EXPIRY,
        max_attempts: int = MAX_RECOMMENDED_ATTEMPTS,
        min_attempts: int = MIN_RECOMMENDED_ATTEMPTS,
        min_resend_delay: int = MIN_RESEND_DELAY,
    ):
        if not min_expiry <= recommended_expiry <= max_expiry:
            raise ValueError("expiry thresholds must satisfy min <= recommended <= max")
        self.min_expiry = min_expiry
        self.recommended_expiry = recommended_expiry
        self.max_expiry = max_expiry
        self.max_attempts = max_attempts
        self.min_attempts = min_attempts
        self.min_resend_delay = min_resend_delay

    def validate(self, config: OTPConfig) -> ValidationResult:
        """
        Check a configuration.

        Args:
            config: The OTP configuration to check

        Returns:
            ValidationResult with warnings and errors
        """
        result = ValidationResult()
        expiry = config.expiry_seconds

        if expiry > self.max_expiry:
            result.errors.append(
                f"OTP expiry exceeds maximum: {expiry}s (max: {self.max_expiry}s)"
            )
        elif expiry > self.recommended_expiry:
            result.warnings.append(
                f"OTP expiry above recommendation: {expiry}s "
                f"(recommended: {self.recommended_expiry}s)"
            )

        if expiry < self.min_expiry:
            result.warnings.append(
                f"OTP expiry very short: {expiry}s "
                f"(recommended minimum: {self.min_expiry}s)"
            )

        if config.max_attempts > self.max_attempts:
            result.warnings.append(
                f"Elevated attempt count: {config.max_attempts} "
                f"(recommended: <= {self.max_attempts})"
            )

        if config.max_attempts < self.min_attempts:
            result.warnings.append(
                f"Attempt count overly restrictive: {config.max_attempts} "
                f"(recommended minimum: {self.min_attempts})"
            )

        if config.resend_delay_seconds < self.min_resend_delay:
            result.warnings.append(
                f"Short resend delay: {config.resend_delay_seconds}s "
                f"(recommended: >= {self.min_resend_delay}s)"
            )

        if result.errors:
            logger.warning(
                "otp_config_rejected",
                expiry_seconds=expiry,
                errors=len(result.errors),
            )
        elif result.warnings:
            logger.info(
                "otp_config_accepted_with_warnings",
                expiry_seconds=expiry,
                warnings=len(result.warnings),
            )

        return result


_default_validator = ConfigValidator()


def validate_config(config: OTPConfig) -> ValidationResult:
    """Validate a configuration against the default policy thresholds."""
    return _default_validator.validate(config)

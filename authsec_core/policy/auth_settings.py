"""
Auth Settings Assessment
========================
Scores the broader authentication settings an administrator can tune.

Scoring (0-100):
- OTP expiry <= 10 min: +30, <= 30 min: +20, <= 60 min: +10
- Email verification required: +15
- Phone verification required: +10
- MFA enabled: +20
- Password minimum length >= 8: +10
- Password requires special characters: +10
- Max login attempts <= 5: +5
"""

from dataclasses import dataclass
from typing import Literal

SecurityLevel = Literal["low", "medium", "high"]

HIGH_LEVEL_THRESHOLD = 80
MEDIUM_LEVEL_THRESHOLD = 50


@dataclass(frozen=True)
class AuthSettings:
    """Administrator-facing authentication settings."""
    otp_expiry_minutes: int = 10
    session_timeout_hours: int = 24
    max_login_attempts: int = 5
    require_email_verification: bool = True
    require_phone_verification: bool = False
    enable_mfa: bool = False
    password_min_length: int = 8
    password_require_special_chars: bool = True
    lockout_duration_minutes: int = 15


def assess_security_score(settings: AuthSettings) -> int:
    score = 0

    if settings.otp_expiry_minutes <= 10:
        score += 30
    elif settings.otp_expiry_minutes <= 30:
        score += 20
    elif settings.otp_expiry_minutes <= 60:
        score += 10

    if settings.require_email_verification:
        score += 15
    if settings.require_phone_verification:
        score += 10
    if settings.enable_mfa:
        score += 20
    if settings.password_min_length >= 8:
        score += 10
    if settings.password_require_special_chars:
        score += 10
    if settings.max_login_attempts <= 5:
        score += 5

    return score


def assess_security_level(settings: AuthSettings) -> SecurityLevel:
    score = assess_security_score(settings)
    if score >= HIGH_LEVEL_THRESHOLD:
        return "high"
    if score >= MEDIUM_LEVEL_THRESHOLD:
        return "medium"
    return "low"


def secure_defaults() -> AuthSettings:
    """Hardened settings recommended for production."""
    return AuthSettings(
        otp_expiry_minutes=10,
        session_timeout_hours=4,
        max_login_attempts=3,
        require_email_verification=True,
        require_phone_verification=True,
        enable_mfa=True,
        password_min_length=12,
        password_require_special_chars=True,
        lockout_duration_minutes=30,
    )

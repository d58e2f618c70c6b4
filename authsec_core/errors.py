"""
Error Types
===========
Exceptions raised inside the security engine.

Only InvalidPresetError reaches callers directly. ConfigurationError is
opt-in via ValidationResult.raise_for_errors(); the other two are caught at
their component boundary and turned into results or log entries.
"""

from typing import List, Optional


class AuthSecError(Exception):
    """Base exception for the OTP security engine."""
    pass


class InvalidPresetError(AuthSecError, ValueError):
    """Raised when an unknown OTP preset name is requested."""

    def __init__(self, name: str, available: Optional[List[str]] = None):
        self.name = name
        self.available = available or []
        message = f"Unknown OTP preset: {name!r}"
        if self.available:
            message += f" (available: {', '.join(self.available)})"
        super().__init__(message)


class ConfigurationError(AuthSecError):
    """An OTP configuration breaks a hard policy threshold."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid OTP configuration")


class ComplianceCheckFailure(AuthSecError):
    """The identity provider could not be reached or answered garbage."""

    def __init__(self, message: str, provider: str = "unknown", status_code: Optional[int] = None):
        self.message = message
        self.provider = provider
        self.status_code = status_code
        super().__init__(f"[{provider}] {message} (Status: {status_code})")


class AlertDispatchFailure(AuthSecError):
    """An alert channel failed to deliver a notification."""

    def __init__(self, message: str, channel: str = "unknown"):
        self.message = message
        self.channel = channel
        super().__init__(f"[{channel}] {message}")

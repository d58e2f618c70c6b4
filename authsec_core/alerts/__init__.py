"""
Security Alerts
===============
Best-effort notification for critical security events.
"""

from .channels import AlertChannel, LoggingAlertChannel, WebhookAlertChannel
from .dispatcher import AlertDispatcher

__all__ = [
    "AlertChannel",
    "LoggingAlertChannel",
    "WebhookAlertChannel",
    "AlertDispatcher",
]

"""
Security Reporting
==================
"""

from .models import ReportStatus, SecurityReport
from .generator import ReportGenerator, REPORT_WINDOW_HOURS

__all__ = [
    "ReportStatus",
    "SecurityReport",
    "ReportGenerator",
    "REPORT_WINDOW_HOURS",
]

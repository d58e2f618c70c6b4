"""
OTP Security Metrics
====================
Metrics storage and security scoring.
"""

from .models import SecurityMetrics, DEFAULT_SECURITY_SCORE
from .scoring import ScoringEngine
from .store import MetricsStore, SCORING_WINDOW_HOURS

__all__ = [
    "SecurityMetrics",
    "DEFAULT_SECURITY_SCORE",
    "ScoringEngine",
    "MetricsStore",
    "SCORING_WINDOW_HOURS",
]

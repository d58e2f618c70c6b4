"""
Structured Logging Setup
========================
Configures structlog for services embedding the security engine.

Usage:
    from authsec_core.logging_config import setup_logging

    setup_logging(service_name="qwonen-authsec")

    # or, from AUTHSEC_SERVICE_NAME and AUTHSEC_LOG_LEVEL
    setup_logging_from_settings(AuthSecSettings())
    logger = structlog.get_logger(__name__)
    logger.info("otp_metrics_updated", total_generated=10)
"""

import logging
import sys
from typing import Optional

import structlog

from .config import AuthSecSettings


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> structlog.stdlib.BoundLogger:
    """
    Configure structlog and the stdlib root logger.

    Args:
        service_name: Name bound into every log entry
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: Whether to render JSON (for production)

    Returns:
        Logger bound to the service name
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.bind_contextvars(service=service_name)

    return structlog.get_logger(service_name)


def setup_logging_from_settings(
    settings: Optional[AuthSecSettings] = None,
    json_output: bool = True,
) -> structlog.stdlib.BoundLogger:
    """Configure logging from AUTHSEC_SERVICE_NAME and AUTHSEC_LOG_LEVEL."""
    settings = settings or AuthSecSettings()
    return setup_logging(settings.service_name, settings.log_level, json_output=json_output)

"""
Tests for logging setup
=======================
"""

import json
import logging

import pytest
import structlog

from authsec_core.config import AuthSecSettings
from authsec_core.logging_config import setup_logging, setup_logging_from_settings


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()
    root = logging.getLogger()
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)


def test_json_logging_includes_service(capsys):
    """Should emit JSON lines carrying the service name."""
    logger = setup_logging(service_name="authsec-log-test", level="debug", json_output=True)

    logger.info("otp_metrics_updated", total_generated=3)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    entry = json.loads(line)
    assert entry["event"] == "otp_metrics_updated"
    assert entry["service"] == "authsec-log-test"
    assert entry["total_generated"] == 3
    assert entry["level"] == "info"
    assert logging.getLogger().level == logging.DEBUG


def test_level_and_service_from_environment(monkeypatch, capsys):
    """Should take the level and service name from AUTHSEC_* variables."""
    monkeypatch.setenv("AUTHSEC_SERVICE_NAME", "authsec-env-test")
    monkeypatch.setenv("AUTHSEC_LOG_LEVEL", "ERROR")

    logger = setup_logging_from_settings()
    logger.warning("otp_metrics_reset")
    logger.error("alert_dispatch_failed", event_id="SEC_00000001")

    assert logging.getLogger().level == logging.ERROR
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 1
    entry = json.loads(lines[0])
    assert entry["event"] == "alert_dispatch_failed"
    assert entry["service"] == "authsec-env-test"


def test_explicit_settings_win(monkeypatch):
    """Should use the settings object passed in over the environment."""
    monkeypatch.setenv("AUTHSEC_LOG_LEVEL", "ERROR")

    setup_logging_from_settings(AuthSecSettings(service_name="authsec-explicit", log_level="DEBUG"))

    assert logging.getLogger().level == logging.DEBUG

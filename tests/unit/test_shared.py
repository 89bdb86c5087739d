"""
Unit tests for the shared/ logging modules.

Covers:
- shared.logging_config (redact_sensitive_fields, hash_ip, setup_logging)
- shared.logging        (get_logger, hash_ip)
"""

from __future__ import annotations

import hashlib
import logging

import pytest
import structlog

from config import LoggingSettings
from shared import logging_config
from shared.logging import get_logger, hash_ip


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


class TestRedactSensitiveFields:
    def test_redacts_secret_and_token(self):
        event = {"event": "x", "secret": "s3cr3t", "token": "abc", "api_key": "k"}
        out = logging_config.redact_sensitive_fields(None, "info", event)
        assert out["secret"] == "***REDACTED***"
        assert out["token"] == "***REDACTED***"
        assert out["api_key"] == "***REDACTED***"
        assert out["event"] == "x"

    def test_keeps_other_fields(self):
        event = {"event": "recaptcha_verified", "success": True, "hostname": "example.com"}
        out = logging_config.redact_sensitive_fields(None, "info", dict(event))
        assert out == event


class TestHashIp:
    def test_passthrough_outside_production(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_hash_ips", False)
        assert hash_ip("1.2.3.4") == "1.2.3.4"

    def test_hashed_in_production(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_hash_ips", True)
        assert hash_ip("1.2.3.4") == hashlib.sha256(b"1.2.3.4").hexdigest()[:16]

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values(self, monkeypatch, value):
        monkeypatch.setattr(logging_config, "_hash_ips", True)
        assert hash_ip(value) == value


class TestSetupLogging:
    def test_production_enables_ip_hashing(self, monkeypatch):
        monkeypatch.setattr(logging_config, "_hash_ips", False)
        logging_config.setup_logging(
            LoggingSettings(env="production", log_level="WARNING", log_format="json")
        )
        assert logging_config._hash_ips is True

    def test_json_output_is_redacted(self, caplog):
        caplog.set_level(logging.WARNING)
        logging_config.configure_structlog("json")
        get_logger("test").warning("recaptcha_secret_check", secret="hunter2")
        out = caplog.records[-1].getMessage()
        assert "hunter2" not in out
        assert "***REDACTED***" in out
        assert '"event": "recaptcha_secret_check"' in out

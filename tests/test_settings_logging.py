"""Tests for settings loading and logging configuration."""

import json
import logging

import pytest

from ocrsdk_client import OcrClientSettings
from ocrsdk_client import logging_config
from ocrsdk_client.logging_config import HumanReadableFormatter, JSONFormatter, setup_logging
from ocrsdk_client.settings import DEFAULT_HOST


class TestSettingsFromEnv:
    def test_defaults(self, monkeypatch):
        monkeypatch.setenv("OCRSDK_APPLICATION_ID", "app")
        monkeypatch.setenv("OCRSDK_PASSWORD", "pw")
        monkeypatch.delenv("OCRSDK_HOST", raising=False)
        monkeypatch.delenv("OCRSDK_LOG_HTTP_BODIES", raising=False)

        settings = OcrClientSettings.from_env()

        assert settings.application_id == "app"
        assert settings.password == "pw"
        assert settings.host == DEFAULT_HOST
        assert settings.log_http_bodies is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("OCRSDK_HOST", "https://cloud-westus.ocrsdk.com")
        monkeypatch.setenv("OCRSDK_TIMEOUT", "30")
        monkeypatch.setenv("OCRSDK_LOG_HTTP_BODIES", "true")

        settings = OcrClientSettings.from_env()

        assert settings.host == "https://cloud-westus.ocrsdk.com"
        assert settings.timeout == 30.0
        assert settings.log_http_bodies is True

    def test_frozen(self):
        settings = OcrClientSettings(application_id="a", password="b")
        with pytest.raises(AttributeError):
            settings.password = "c"


class TestJSONFormatter:
    def make_record(self, **extra):
        record = logging.LogRecord("ocrsdk_client.core", logging.INFO, __file__, 10, "hello", None, None)
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_extra_fields(self):
        data = json.loads(JSONFormatter().format(self.make_record(task_id="A", status_code=200)))

        assert data["message"] == "hello"
        assert data["level"] == "INFO"
        assert data["task_id"] == "A"
        assert data["status_code"] == 200

    def test_unknown_extra_ignored(self):
        data = json.loads(JSONFormatter().format(self.make_record(secret="x")))
        assert "secret" not in data


class TestSetupLogging:
    @pytest.fixture(autouse=True)
    def _reset(self):
        root = logging.getLogger()
        handlers, level = root.handlers[:], root.level
        logging_config._logging_initialized = False
        yield
        logging_config._logging_initialized = False
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_text_format(self):
        setup_logging(level=logging.DEBUG, log_format="text")

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[-1].formatter, HumanReadableFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_json_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        setup_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[-1].formatter, JSONFormatter)

    def test_idempotent(self):
        setup_logging(log_format="text")
        handlers = logging.getLogger().handlers[:]

        setup_logging(log_format="json")

        assert logging.getLogger().handlers == handlers

"""Settings — defaults and environment overrides."""

import pytest
from pydantic import ValidationError

from user_service.config import Settings


def test_defaults(monkeypatch):
    for var in ("PORT", "LOG_FORMAT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8080
    assert settings.log_format == "json"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == []


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_FORMAT", "TEXT")
    settings = Settings(_env_file=None)
    assert settings.port == 9090
    assert settings.log_format == "text"


def test_unknown_log_format_rejected(monkeypatch):
    monkeypatch.setenv("LOG_FORMAT", "xml")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_from_environment(monkeypatch):
    monkeypatch.setenv("CORS_ORIGINS", '["https://admin.example.com"]')
    settings = Settings(_env_file=None)
    assert settings.cors_origins == ["https://admin.example.com"]

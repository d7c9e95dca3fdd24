"""
Tests for settings defaults and environment overrides.
"""
from urlshort.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("HOST", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    s = Settings(_env_file=None)
    assert s.port == 8080
    assert s.host == "0.0.0.0"
    assert s.log_level == "INFO"


def test_environment_override(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.port == 9090
    assert s.log_level == "DEBUG"

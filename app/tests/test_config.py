import pytest

import main
from core.config import get_settings
from core.errors import ConfigError


def test_missing_api_key_is_config_error(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(ConfigError):
        get_settings()


def test_server_exits_without_api_key(monkeypatch):
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    with pytest.raises(SystemExit) as exc:
        main.run()
    assert exc.value.code == 1


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RATE_LIMIT_POINTS", "5")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, https://example.com")
    monkeypatch.delenv("GENERATION_MODEL", raising=False)
    settings = get_settings()
    assert settings.port == 8080
    assert settings.rate_limit_points == 5
    assert settings.generation_model == "gemini-2.0-flash"
    assert settings.cors_origins == ["http://localhost:5173", "https://example.com"]


def test_invalid_port_is_config_error(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "abc")
    monkeypatch.setenv("PORT", "not-a-port")
    with pytest.raises(ConfigError):
        get_settings()

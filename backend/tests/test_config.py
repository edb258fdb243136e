import pytest
from pydantic import ValidationError

from origin_server.core.config import Settings, get_settings


def test_defaults_match_fixed_listener():
    settings = Settings()
    assert settings.PORT == 3000
    assert settings.CONTENT_DIR == "/app/content"
    assert settings.SERVER_NAME == "origin-server"
    assert settings.DISPLAY_TIMEZONE == "Asia/Kolkata"


def test_environment_does_not_override_settings(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("CONTENT_DIR", "/tmp/elsewhere")
    settings = Settings()
    assert settings.PORT == 3000
    assert settings.CONTENT_DIR == "/app/content"


def test_explicit_arguments_override_defaults(tmp_path):
    settings = Settings(CONTENT_DIR=str(tmp_path))
    assert settings.CONTENT_DIR == str(tmp_path)


def test_settings_are_frozen():
    settings = Settings()
    with pytest.raises(ValidationError):
        settings.PORT = 8080


def test_get_settings_is_cached():
    assert get_settings() is get_settings()

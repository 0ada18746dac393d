"""
Tests for settings and client wiring.
"""
import pytest

from config.settings import Settings
from stagedoor.api_client import create_api_client
from stagedoor.session import FileTokenStore


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_URL", "APP_ENV", "SITE_ORIGIN", "DEV_SERVER_URL", "TOKEN_FILE"):
        monkeypatch.delenv(name, raising=False)


def test_explicit_api_url_wins():
    settings = Settings(_env_file=None, api_url="https://api.example.com/", app_env="production")

    assert settings.resolve_base_url() == "https://api.example.com"


def test_development_falls_back_to_local_server():
    settings = Settings(_env_file=None, app_env="development")

    assert settings.is_development
    assert settings.resolve_base_url() == "http://localhost:3001"


def test_production_falls_back_to_site_origin():
    settings = Settings(_env_file=None, app_env="production", site_origin="https://music.example.com")

    assert not settings.is_development
    assert settings.resolve_base_url() == "https://music.example.com"


def test_environment_variables_are_read(monkeypatch):
    monkeypatch.setenv("API_URL", "https://staging.example.com")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "5")

    settings = Settings(_env_file=None)

    assert settings.resolve_base_url() == "https://staging.example.com"
    assert settings.cache_ttl_seconds == 5.0


def test_create_api_client_uses_settings(tmp_path):
    settings = Settings(
        _env_file=None,
        app_env="production",
        site_origin="https://music.example.com",
        token_file=tmp_path / "session.json",
    )

    client = create_api_client(settings)

    assert client.base_url == "https://music.example.com"
    assert client.timeout == 10.0
    assert client.is_development is False
    assert isinstance(client.token_store, FileTokenStore)
    assert client.token_store.path == tmp_path / "session.json"
    assert client._cache.ttl_seconds == 30.0

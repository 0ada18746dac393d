"""Configuration management using pydantic-settings."""
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Backend location
    # Explicit API origin; when unset the base URL depends on app_env
    api_url: Optional[str] = None
    app_env: str = "development"
    # Origin the site (and its API) is served from in production
    site_origin: str = "http://localhost:3001"
    # Local API server, the target of the dev proxy
    dev_server_url: str = "http://localhost:3001"

    # Transport
    request_timeout_seconds: float = 10.0

    # Cache settings
    cache_ttl_seconds: float = 30.0

    # Session
    token_file: Path = Path("./.stagedoor/session.json")
    token_key: str = "accessToken"
    login_path: str = "/admin/login"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def is_development(self) -> bool:
        return self.app_env.lower() != "production"

    def resolve_base_url(self) -> str:
        """
        Resolve the API base URL.

        An explicit API_URL always wins. Development falls back to the
        local API server the dev proxy forwards /api to; production falls
        back to the site's own origin.
        """
        if self.api_url:
            return self.api_url.rstrip("/")
        if self.is_development:
            return self.dev_server_url.rstrip("/")
        return self.site_origin.rstrip("/")


settings = Settings()

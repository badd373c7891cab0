"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from webplayer_client.domain.sessions import WebPlayerFeatures

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    api_base_url: str = "https://app.corellium.com/api/v1"
    api_token: str
    project_id: str
    admin_token: str
    webplayer_features: str | None = None
    webplayer_expires_in: int = 600
    request_timeout: float = 15
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_features(raw: str | None) -> WebPlayerFeatures:
    """Parse a comma-separated list of enabled feature flags."""
    if raw is None:
        return WebPlayerFeatures()
    flags = {chunk.strip() for chunk in raw.split(",") if chunk.strip()}
    return WebPlayerFeatures.from_payload({flag: True for flag in flags})

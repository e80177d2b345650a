"""Client configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from openmensa_client.adapters.openmensa_client import DEFAULT_BASE_URL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Client settings loaded from OPENMENSA_* environment variables."""

    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10
    catalogue_ttl_seconds: int = 0
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="OPENMENSA_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Sync
    module_enabled: bool = True
    tagging_enabled: bool = True

    # Personalization service
    personalization_api_url: str = "http://personalization-api:8080"
    personalization_api_timeout: float = 10.0

    # Catalog fixture for the in-memory collaborators
    catalog_fixture_path: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json: bool = False


settings = Settings()

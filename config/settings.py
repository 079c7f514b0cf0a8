"""
Application settings module.

Manages all configuration via environment variables using pydantic-settings.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class PostgresSettings(BaseSettings):
    """PostgreSQL connection settings."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="PG_", extra="ignore")

    host: str = "localhost"
    port: int = 5432
    user: str = "admin"
    password: str = "1234"
    database: str = "property_dev"
    pool_max: int = 10


class GoogleMapsSettings(BaseSettings):
    """Google Maps (geocoding / places) settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="GOOGLE_MAPS_", extra="ignore"
    )

    api_key: str = ""  # GOOGLE_MAPS_API_KEY
    timeout_seconds: float = 5.0

    @property
    def enabled(self) -> bool:
        """Whether an API key is configured."""
        return bool(self.api_key)


class RecommendationSettings(BaseSettings):
    """Recommendation pagination settings."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="RECOMMEND_", extra="ignore"
    )

    default_limit: int = 20
    max_limit: int = 50


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "INFO"
    cors_origins: str = "*"

    postgres: PostgresSettings = PostgresSettings()
    google_maps: GoogleMapsSettings = GoogleMapsSettings()
    recommendation: RecommendationSettings = RecommendationSettings()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

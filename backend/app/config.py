"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Generative text (required for itinerary generation)
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    openai_base_url: str | None = None

    # Photo search (optional, placeholder images without it)
    unsplash_access_key: SecretStr | None = None
    unsplash_api_url: str = "https://api.unsplash.com/search/photos"
    placeholder_image_url: str = "https://loremflickr.com/1600/900"
    photo_timeout_s: float = 4.0

    # UI
    ui_origin: str = "http://localhost:8501"

    # Logging
    log_level: str = "INFO"

    @property
    def has_llm_credentials(self) -> bool:
        """True when a non-empty generative text key is configured."""
        return bool(self.openai_api_key and self.openai_api_key.get_secret_value())

    @property
    def has_photo_credentials(self) -> bool:
        """True when a non-empty photo search key is configured."""
        return bool(self.unsplash_access_key and self.unsplash_access_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""Build configuration using pydantic-settings.

Values come from ``SLAYD_*`` environment variables or a local ``.env`` file.
The renderers themselves take explicit arguments; settings only affect how
the builder assembles documents and how the CLI logs.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Build settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SLAYD_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Document defaults
    default_lang: str = "es"
    default_transition: str = "fade"

    # Assets
    stylesheet: str = "presentation.css"
    highlight_cdn: str = "https://cdnjs.cloudflare.com/ajax/libs/highlight.js/11.9.0"

    # Replace slides that fail to render with an error slide
    isolate_slide_errors: bool = False

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

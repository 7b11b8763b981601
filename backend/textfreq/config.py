"""
Application configuration using pydantic-settings.
All settings are loaded from environment variables (TEXTFREQ_ prefix).
"""
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from textfreq.services.normalizer import NormalizationMode


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TEXTFREQ_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Text Frequency API"
    debug: bool = False

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Analysis
    normalization_mode: NormalizationMode = NormalizationMode.HANGUL_ONLY
    default_top_n: Optional[int] = Field(None, ge=1)

    # Request limits
    max_text_bytes: int = 1_000_000  # 1MB


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

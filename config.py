"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gemini API (the only secret; empty means every transform request fails)
    api_key: str = Field(default="", validation_alias=AliasChoices("API_KEY", "GEMINI_API_KEY"))
    gemini_model: str = "gemini-2.5-flash-image-preview"

    # Relay endpoint used by the client and CLI
    relay_url: str = "http://localhost:8000/api/transform-image"
    relay_timeout_seconds: Optional[float] = None  # None = wait for the relay indefinitely


@lru_cache
def get_settings() -> Settings:
    return Settings()

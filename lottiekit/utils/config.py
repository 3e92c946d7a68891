"""Application configuration."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and LOTTIEKIT_* environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="LOTTIEKIT_")

    lottie_version: str = "5.5.7"
    default_name: str = "Animation"
    default_width: int = Field(default=512, ge=1)
    default_height: int = Field(default=512, ge=1)
    default_duration: int = Field(default=60, ge=1)
    default_frame_rate: int = Field(default=30, ge=1, le=120)
    log_level: str = "INFO"


settings = Settings()

"""
Translator configuration.

Centralized configuration management with environment variables
(prefix ``KOSC_``) and an optional ``.env`` file.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Translator settings"""

    model_config = SettingsConfigDict(
        env_prefix="KOSC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_FORMAT: Literal["json", "text"] = "text"
    LOG_FILE: Optional[str] = None

    # I/O
    ENCODING: str = "utf-8"

    # Diagnostics
    CONTEXT_WIDTH: int = Field(default=20, ge=0)  # chars of input shown in parse errors


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()

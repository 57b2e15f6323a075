"""
Toolkit settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from upcean.models.barcode import EightDigitPolicy


class Settings(BaseSettings):
    """Configuration loaded from UPCEAN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="UPCEAN_",
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Barcode defaults
    eight_digit_policy: EightDigitPolicy = Field(
        EightDigitPolicy.PREFER_UPCE, description="Tie-break order for 8-digit codes"
    )
    default_number_system: int = Field(
        0, ge=0, le=1, description="Number system assumed for bare 6-digit UPC-E cores"
    )

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["json", "text"] = "text"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()

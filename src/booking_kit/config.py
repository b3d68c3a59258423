"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Booking kit settings."""

    model_config = SettingsConfigDict(
        env_prefix="BOOKING_KIT_",
        env_file=".env",
        case_sensitive=False,
        env_ignore_empty=True,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    service_name: str = "booking-kit"
    log_dir: Optional[str] = None
    log_enable_console: bool = True
    log_enable_file: bool = False

    # Lifecycle
    strict_transitions: bool = False
    check_availability: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the log level name."""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings."""
    return Settings()

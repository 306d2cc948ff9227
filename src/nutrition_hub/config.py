"""Application configuration."""

import os

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    calorieninjas_api_key: str | None = None
    calorieninjas_base_url: str = "https://api.calorieninjas.com/v1"
    calorieninjas_timeout_seconds: float = 15.0
    quota_daily_limit: int = 1000
    quota_monthly_limit: int = 10000
    quota_warning_threshold: float = 0.8
    quota_timezone: str = "UTC"
    retry_max_attempts: int = Field(default=3, ge=1)
    retry_delays_seconds: tuple[float, ...] = Field(
        default=(1.0, 2.0, 4.0), min_length=1
    )
    record_failed_provider_calls: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        frozen=True,
    )

    @field_validator("retry_delays_seconds")
    @classmethod
    def _delays_non_negative(cls, value: tuple[float, ...]) -> tuple[float, ...]:
        if any(delay < 0 for delay in value):
            raise ValueError("retry delays must be non-negative")
        return value

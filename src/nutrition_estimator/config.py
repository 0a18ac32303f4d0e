"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

DEMO_API_KEY = "DEMO_KEY"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    supabase_timeout_seconds: int = 10
    admin_token: str
    fdc_api_key: str = DEMO_API_KEY
    fdc_base_url: str = "https://api.nal.usda.gov/fdc/v1"
    fdc_timeout_seconds: float = 15
    fdc_page_size: int = 25
    fdc_retry_attempts: int = 1
    memory_cache_max_entries: int = 2000
    memory_cache_ttl_seconds: int = 7200
    warm_up_enabled: bool = True
    warm_up_delay_seconds: float = 1.0
    warm_up_foods: str | None = None
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_warm_up_foods(raw: str | None) -> tuple[str, ...] | None:
    """Parse the warm-up food list from env; None means use the defaults."""
    if raw is None:
        return None
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return None
    foods = [" ".join(chunk.split()).lower() for chunk in cleaned.split(",")]
    return tuple(food for food in foods if food) or None

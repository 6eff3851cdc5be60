"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    admin_token: str
    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    kitchen_timezone: str = "UTC"
    # Day horizons for expiry alerts and waste-risk insights.
    expiry_days: int = 2
    insights_expiry_days: int = 3
    low_stock_threshold: float = 3
    suggested_order_add_on: float = 5

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

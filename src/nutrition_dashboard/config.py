"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_backend: Literal["memory", "supabase"] = "memory"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_table: str = "kv_store"
    timezone: str = "UTC"
    state_key: str = "nutritionData"
    preferences_key: str = "prefs"
    wearable_key: str = "lastWearable"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

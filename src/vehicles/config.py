"""Application configuration and settings management."""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="VEHICLES_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Vehicles API"
    api_prefix: str = ""
    log_level: str = Field(default="INFO", description="Root logger level name.")

    pricing_base_url: Optional[str] = Field(
        default="http://localhost:8082",
        description="Base URL for the pricing service (e.g., http://localhost:8082).",
    )
    maps_base_url: Optional[str] = Field(
        default="http://localhost:9191",
        description="Base URL for the maps/address service (e.g., http://localhost:9191).",
    )
    lookup_timeout_seconds: float = Field(default=5.0, gt=0.0)
    lookup_connect_timeout_seconds: float = Field(default=2.0, gt=0.0)
    lookup_max_retries: int = Field(default=3, ge=0)
    lookup_backoff_seconds: float = Field(default=0.5, ge=0.0)
    enrichment_max_workers: int = Field(
        default=8,
        ge=1,
        description="Upper bound on concurrent per-car enrichment when listing.",
    )

    # Supabase configuration
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL (e.g., https://xxx.supabase.co).",
    )
    supabase_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key for backend operations.",
    )
    supabase_table: str = Field(default="cars")

    @field_validator("pricing_base_url", "maps_base_url", mode="before")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = str(value).strip()
        return value.rstrip("/") or None

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return str(value).strip().upper() or "INFO"


settings = Settings()

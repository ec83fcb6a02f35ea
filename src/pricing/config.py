"""Pricing service settings."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PricingSettings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="PRICING_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Pricing Service"
    log_level: str = "INFO"
    currency: str = Field(default="USD", min_length=3, max_length=3)
    seed_vehicle_count: int = Field(default=20, ge=0, description="Vehicle ids 1..N get a price at startup.")
    min_price: float = Field(default=10_000.0, gt=0.0)
    max_price: float = Field(default=50_000.0, gt=0.0)
    random_seed: int = Field(default=42, description="Seed for the generated price list.")

    @field_validator("currency", mode="before")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return str(value).strip().upper()


settings = PricingSettings()

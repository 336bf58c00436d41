"""
Application settings loaded from environment variables.

All settings use the SHOPPING_ prefix, e.g. SHOPPING_CURRENCY_SYMBOL=€.
Values can also be placed in a local .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SHOPPING_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Page
    app_title: str = "Shopping List"
    page_icon: str = "🛒"
    footer_text: str = "Huda Hussein Ali shopping site"

    # Prices
    currency_symbol: str = "$"
    price_high_threshold: float = 100
    price_medium_threshold: float = 50
    allow_negative_prices: bool = False  # Reject prices below zero unless enabled

    # Cards
    assets_dir: str = "assets"  # Where item images (perfume.png, ...) live
    cards_per_row: int = Field(default=3, ge=1, le=6)

    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()

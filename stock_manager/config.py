"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Dict

from pydantic_settings import BaseSettings

# ===========================================
# Product Branding
# ===========================================
PRODUCT_NAME = "Stock Manager"
PRODUCT_TAGLINE = "Holdings, trades and portfolio value in one place."
PRODUCT_VERSION = "1.0.0"
PRODUCT_DESCRIPTION = "Buy, sell and value a portfolio of stock holdings."

# Prices known at start-up; anything else gets a synthesized price
DEFAULT_SEED_PRICES: Dict[str, float] = {
    "AAPL": 150.0,
    "GOOGL": 2800.0,
    "MSFT": 350.0,
    "AMZN": 3200.0,
    "TSLA": 800.0,
}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database
    database_url: str = "sqlite:///./stock_manager.db"

    # Logging
    log_level: str = "INFO"

    # Price source
    seed_prices: Dict[str, float] = dict(DEFAULT_SEED_PRICES)
    random_price_min: float = 50.0
    random_price_span: float = 500.0

    # Rate limiting (buy/sell endpoints)
    trade_rate_limit: str = "120/minute"
    rate_limit_enabled: bool = True

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

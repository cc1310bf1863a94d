"""
Application Configuration

All settings loaded from environment variables.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "MarketDesk Backend"
    app_version: str = "0.1.0"
    debug: bool = False
    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS (Frontend URL)
    frontend_url: str = "http://localhost:5173"
    allowed_origins: list[str] = ["http://localhost:5173"]

    # Risk Settings (Defaults for a new trader)
    default_total_capital: float = 100000.0
    default_max_position_percent: float = 10.0
    default_max_risk_per_trade_percent: float = 2.0
    default_max_daily_loss_percent: float = 5.0
    default_volume_multiplier: float = 1.5
    default_auto_stop_loss: bool = True

    # Calculator behaviour
    default_target_percent: float = 5.0  # Target when trader leaves it blank
    narrow_cpr_threshold: float = 0.01  # CPR width / close

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

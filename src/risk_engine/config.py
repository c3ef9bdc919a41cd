"""
Runtime settings for the risk dashboard.

Values come from environment variables prefixed with RISK_ (or a local .env file):
- RISK_DEFAULT_MODEL: model used when the form leaves the selector blank
- RISK_CLINICAL_OVERLAY: add clinical-factor bonuses before bucketing
- RISK_HISTORY_MAX_ENTRIES / RISK_SAVED_MAX_ENTRIES: history bounds
- RISK_SIMULATED_DELAY_SECONDS: artificial latency for the dashboard only
"""
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="RISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Diabetes Risk Dashboard"
    default_model: str = "ensemble"
    clinical_overlay: bool = True
    history_max_entries: int = Field(default=100, ge=1)
    saved_max_entries: int = Field(default=50, ge=1)
    simulated_delay_seconds: float = Field(default=0.0, ge=0.0)
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()

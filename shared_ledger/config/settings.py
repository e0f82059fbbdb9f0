"""
Configuration Management for Shared Ledger

Uses pydantic-settings for type-safe configuration from environment variables.

DESIGN DECISION: The settlement engine never reads configuration.
Settings are consumed by the ledger and ingestion layers, which pass
explicit arguments into the engine so its output only depends on input.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """
    Main application settings.

    Loads configuration from environment variables and .env file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LEDGER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    log_level: str = Field(
        default="INFO",
        description="Minimum level for structured logs"
    )

    # Reporting
    include_category_totals: bool = Field(
        default=True,
        description="Compute per-category breakdowns in monthly totals"
    )

    # Ingestion
    two_digit_year_pivot: int = Field(
        default=50,
        ge=0,
        le=99,
        description="Two-digit years below this are 20YY, others 19YY"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Only accept standard logging level names."""
        level = v.strip().upper()
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if level not in allowed:
            raise ValueError(f"Unsupported log level: {v}. Allowed: {sorted(allowed)}")
        return level


@lru_cache()
def get_settings() -> LedgerSettings:
    """
    Get application settings (cached).

    Call get_settings.cache_clear() to reload if needed.
    """
    return LedgerSettings()

"""
Application settings with Pydantic v2 validation.

Loads configuration from environment variables with sensible defaults.
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LedgerSettings(BaseSettings):
    """Ledger computation configuration."""

    model_config = SettingsConfigDict(env_prefix="LEDGER_")

    # Tolerances for "settled" comparisons
    currency_epsilon: float = 0.01
    weight_epsilon: float = 0.001

    # Karat every gold weight is normalized to for cross-karat totals
    reference_karat: int = 21

    # Dashboard trend window (calendar days, ending today)
    trend_days: int = 30

    # Display values for trader transactions whose trader no longer exists
    deleted_trader_name: str = "تاجر محذوف"
    deleted_trader_category: Literal["GOLD", "SILVER"] = "GOLD"

    # Reject payments larger than the invoice's outstanding balance
    enforce_payment_ceiling: bool = True

    @field_validator("reference_karat")
    @classmethod
    def check_reference_karat(cls, v: int) -> int:
        if v not in (18, 21, 24):
            raise ValueError("reference_karat must be one of 18, 21, 24")
        return v


class StorageSettings(BaseSettings):
    """Storage configuration."""

    model_config = SettingsConfigDict(env_prefix="STORAGE_")

    data_dir: Path = Path("data")
    db_name: str = "goldbook.db"

    # SQLite settings
    pool_size: int = 5
    busy_timeout: int = 30000  # ms

    @property
    def db_path(self) -> Path:
        return self.data_dir / self.db_name


class APISettings(BaseSettings):
    """API server configuration."""

    model_config = SettingsConfigDict(env_prefix="API_")

    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    cors_origins: list[str] = ["*"]


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Alfadi Jewelry Ledger"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    # JSON-lines copy of the log inside the data directory (non-development only)
    log_file: str | None = "goldbook.log"

    # Sub-settings
    ledger: LedgerSettings = Field(default_factory=LedgerSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    api: APISettings = Field(default_factory=APISettings)

    @field_validator("storage", mode="before")
    @classmethod
    def ensure_data_dir(cls, v: Any) -> StorageSettings:
        if isinstance(v, dict):
            settings = StorageSettings(**v)
        else:
            settings = v or StorageSettings()
        settings.data_dir.mkdir(parents=True, exist_ok=True)
        return settings


# Global settings instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings (for testing)."""
    global _settings
    _settings = None

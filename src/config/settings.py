"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Server configuration
    app_name: str = "trustpay"
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    # Account settings
    demo_wallet_balance: int = 125000  # Prefilled wallet for every new account
    default_role: str = "user"

    # Boundary settings
    static_dir: str = "public"  # Served at / when the directory exists
    cors_origins: list[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Health Balance — weekly longevity score tracker."
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Health Balance contributors"]
    PROJECT_URL: str = "https://github.com/health-balance/health-balance"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (single-user SQLite store)
    DATABASE_URL: str = "sqlite:///./data/health.db"

    # Scoring
    CARDIO_RECOVERY_BASELINE: int = 25

    # Web Push / VAPID
    VAPID_PUBLIC_KEY: str = ""
    VAPID_PRIVATE_KEY: str = ""
    VAPID_SUBJECT: str = "mailto:admin@health-balance.local"
    VAPID_AUTH_SCHEME: str = "webpush"  # "webpush" or "vapid"

    # Reminder scheduler
    NOTIFICATIONS_ENABLED: bool = True
    NOTIFICATION_TICK_SECONDS: int = 60
    PUSH_TIMEOUT_SECONDS: float = 10.0
    PUSH_TTL_SECONDS: int = 30

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()

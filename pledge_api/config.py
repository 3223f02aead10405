"""
Application configuration using environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Pledge API"
    debug: bool = False
    environment: str = "development"

    # Database
    database_url: str = "sqlite:///./pledges.db"
    database_timeout: int = 10  # seconds

    # Email (Resend)
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com"
    email_timeout: int = 10  # seconds per send
    email_from: str = "If We All Did <begin@updates.ifwealldid.org>"

    # Trigger authorization. Unset means every caller is allowed.
    cron_secret: Optional[str] = None

    # Campaigns
    base_url: str = "https://ifwealldid.org"
    default_campaign: str = "pilot_v1"

    # CORS
    cors_origins: List[str] = [
        "http://localhost:3000",
        "https://ifwealldid.org",
    ]

    # Rate limiting
    pledge_rate_limit: str = "10/minute"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

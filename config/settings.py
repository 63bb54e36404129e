"""
Configuration settings for the trial control service
"""
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Subscription status that exempts a profile from trial expiration
PREMIUM_STATUS = "premium"


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,  # Allow both field name and alias
        extra="ignore",
    )

    # Trial rules
    trial_warning_days: int = Field(default=3, ge=0, alias="TRIAL_WARNING_DAYS")
    trial_length_days: int = Field(default=7, ge=1, alias="TRIAL_LENGTH_DAYS")
    premium_status: str = Field(default=PREMIUM_STATUS, alias="PREMIUM_STATUS")

    # Frontend configuration
    frontend_url: Optional[str] = Field(default="http://localhost:5173", alias="FRONTEND_URL")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Environment configuration
    env: Optional[str] = Field(default=None, alias="ENV")


# Instantiate settings object
settings = Settings()

# Determine if we're in production mode
IS_PRODUCTION = bool(settings.env and settings.env.lower() == "production")

"""
Heads Up - Application Configuration
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )
    
    # -------------------------------------------------------------------------
    # Application
    # -------------------------------------------------------------------------
    APP_ENV: str = Field(default="development")
    APP_DEBUG: bool = Field(default=True)
    
    # -------------------------------------------------------------------------
    # Alerts
    # -------------------------------------------------------------------------
    # Notifier used when an alert is raised without an explicit notifier name
    HEADSUP_DEFAULT_NOTIFIER: str = Field(default="flash")
    HEADSUP_VIEW_NOTIFIER: str = Field(default="view")
    HEADSUP_DEFAULT_AREA: str = Field(default="default")
    HEADSUP_FORM_AREA: str = Field(default="form")
    
    # -------------------------------------------------------------------------
    # Session flash storage
    # -------------------------------------------------------------------------
    HEADSUP_SESSION_KEY: str = Field(default="headsup.flash")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()

"""
Environment-driven configuration for Grouper.

Uses pydantic-settings for type-safe environment variable management.
Runtime settings (logging) are configured via GROUPER_* environment
variables or a .env file; algorithm settings live in grouper.config.
"""

from enum import Enum
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Deployment environment."""
    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Environment variable names are the uppercase field names prefixed
    with GROUPER_, e.g. GROUPER_LOG_LEVEL=DEBUG.
    """

    model_config = SettingsConfigDict(
        env_prefix="GROUPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Environment.PRODUCTION

    # === Logging ===
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    use_colors: bool = True

    # === Clustering ===
    config_path: Optional[str] = None

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with values from environment
    """
    return Settings()

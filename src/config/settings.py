"""Application settings and configuration."""

import logging
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application (hardcoded constants)
    app_name: str = "Signup Form Validation"
    app_version: str = "0.1.0"

    # Environment-specific settings
    environment: str = "development"  # development, staging, production

    # Validation
    # non_alphanumeric: any character outside [A-Za-z0-9] counts as a symbol
    # punctuation: only the enumerated punctuation set counts
    password_symbol_policy: Literal["non_alphanumeric", "punctuation"] = "non_alphanumeric"

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_envs = {"development", "staging", "production"}
        env = str(v).lower()
        if env not in valid_envs:
            raise ValueError(f"Environment must be one of {valid_envs}, got {env}")
        return env

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level against the standard logging level names."""
        valid_levels = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}
        level = str(v).upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got {level}")
        return level


settings = Settings()

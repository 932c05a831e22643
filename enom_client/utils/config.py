"""
Configuration management using Pydantic Settings
Loads and validates eNom credentials and client options from environment / .env
"""

import os
from pathlib import Path
from typing import Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Supports both the eNom TEST (resellertest) and LIVE environments.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # eNom API Configuration
    enom_username: str = Field(
        ...,
        description="eNom reseller account login (uid)"
    )
    enom_api_key: str = Field(
        ...,
        description="eNom API token / password (pw)"
    )
    enom_env: Literal["TEST", "LIVE"] = Field(
        default="TEST",
        description="eNom environment: TEST (resellertest) or LIVE"
    )

    # Transport behaviour
    enom_timeout: int = Field(
        default=30,
        gt=0,
        description="HTTP timeout in seconds for a single eNom request"
    )
    enom_max_attempts: int = Field(
        default=3,
        ge=1,
        description="Attempts per request when the transport fails (network / 5xx / 429)"
    )

    # Logging Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level: DEBUG, INFO, WARNING, ERROR, CRITICAL"
    )
    enom_log_file: Optional[str] = Field(
        default=None,
        description="Log file name under logs/; no file logging when unset"
    )

    @property
    def enom_base_url(self) -> str:
        """
        Returns the eNom interface URL for the configured environment
        """
        if self.enom_env == "TEST":
            return "https://resellertest.enom.com/interface.asp"
        return "https://reseller.enom.com/interface.asp"

    @property
    def enom_auth_params(self) -> dict:
        """
        Returns the credential query parameters sent with every eNom command
        """
        return {
            "uid": self.enom_username,
            "pw": self.enom_api_key
        }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"log_level must be one of {valid_levels}")
        return v_upper

    @field_validator("enom_username", "enom_api_key")
    @classmethod
    def validate_enom_credentials(cls, v: str) -> str:
        """Reject empty credentials and the placeholders from .env.example"""
        if not v or v.startswith("your_"):
            raise ValueError(
                "eNom API credentials must be set in the environment or .env file. "
                "Copy .env.example to .env and add your reseller login and API token."
            )
        return v

    def is_production(self) -> bool:
        """Check if running against the LIVE environment"""
        return self.enom_env == "LIVE"


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get or create the settings singleton instance.
    Loads configuration from the environment and .env file on first call.

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If neither .env nor ENOM_USERNAME in the environment exists
        ValidationError: If required settings are missing or invalid
    """
    global _settings

    if _settings is None:
        env_file = Path(".env")
        if not env_file.exists() and "ENOM_USERNAME" not in os.environ:
            raise FileNotFoundError(
                ".env file not found. Please copy .env.example to .env and "
                "configure your eNom API credentials."
            )

        _settings = Settings()

    return _settings


def reset_settings():
    """
    Reset the settings singleton (useful for testing)
    """
    global _settings
    _settings = None

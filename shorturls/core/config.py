"""Application configuration module.

This module contains settings for the URL shortener and the log relay,
loaded from environment variables with appropriate defaults.
"""

from __future__ import annotations

import string
from enum import Enum
from typing import List, Union

from pydantic import ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EnvironmentType(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """Application settings loaded from environment variables with defaults.

    Settings are loaded from environment variables, with fallback to
    values in .env file if present, and finally to the default values
    specified here.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment setting
    ENVIRONMENT: EnvironmentType = EnvironmentType.DEVELOPMENT

    # App Information
    APP_NAME: str = "URL Shortener"
    APP_VERSION: str = "0.1.0"
    APP_DESCRIPTION: str = "In-memory URL shortening service with click analytics"
    RELAY_APP_NAME: str = "Log Relay"

    # API Configuration
    BASE_URL: str = "http://localhost:5000"  # Used for generating short links
    SHORT_URL_PREFIX: str = "/shorturls"
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # CORS settings
    CORS_ORIGINS: Union[List[str], str] = ["*"]

    # URL Shortening Configuration
    DEFAULT_VALIDITY_MINUTES: int = 30
    URL_CODE_LENGTH: int = 6  # Length of generated short codes
    URL_CODE_CHARS: str = string.ascii_lowercase + string.digits
    URL_CODE_MAX_ATTEMPTS: int = 10  # Collision retries before giving up
    URL_CUSTOM_CODE_MIN_LENGTH: int = 4
    URL_CUSTOM_CODE_MAX_LENGTH: int = 10
    URL_RESERVED_CODES: List[str] = ["allurls"]  # Path segments routed before redirect

    # Logging configuration
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"
    LOG_FILENAME: str = "app.log"
    LOG_ROTATION: str = "10 MB"
    LOG_RETENTION: str = "7 days"
    LOG_FORMAT: str = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level} | {message}"
    LOG_JSON: bool = True
    REQUEST_LOGGING_ENABLED: bool = True
    URL_ACCESS_LOG_ENABLED: bool = True

    # External evaluation service (access tokens and log submission)
    EVALUATION_AUTH_URL: str = "http://20.244.56.144/evaluation-service/auth"
    EVALUATION_LOGS_URL: str = "http://20.244.56.144/evaluation-service/logs"
    EVALUATION_TIMEOUT_SECONDS: float = 10.0
    EVALUATION_EMAIL: str = ""
    EVALUATION_NAME: str = ""
    EVALUATION_ROLL_NO: str = ""
    EVALUATION_ACCESS_CODE: str = ""
    EVALUATION_CLIENT_ID: str = ""
    EVALUATION_CLIENT_SECRET: str = ""

    # Log relay: where the relay asks for a token before forwarding
    RELAY_TOKEN_URL: str = "http://localhost:5000/auth/accessToken"

    # Validators
    @field_validator("CORS_ORIGINS")
    def validate_list_or_string(cls, v: Union[List[str], str]) -> List[str]:
        """Convert comma-separated string to list if needed."""
        if isinstance(v, str):
            if not v.strip():
                return []
            if v == "*":
                return ["*"]
            return [item.strip() for item in v.split(",")]
        return v

    @field_validator("URL_CODE_CHARS")
    def validate_code_chars(cls, v: str) -> str:
        if not v:
            raise ValueError("URL_CODE_CHARS must not be empty")
        return v

    @field_validator("URL_CUSTOM_CODE_MAX_LENGTH")
    def validate_custom_code_bounds(cls, v: int, info: ValidationInfo) -> int:
        min_length = info.data.get("URL_CUSTOM_CODE_MIN_LENGTH", 1)
        if v < min_length:
            raise ValueError("URL_CUSTOM_CODE_MAX_LENGTH must be >= URL_CUSTOM_CODE_MIN_LENGTH")
        return v

    def short_link(self, short_code: str) -> str:
        """Build the public short link for a code."""
        return f"{self.BASE_URL.rstrip('/')}{self.SHORT_URL_PREFIX}/{short_code}"


# Create a singleton instance of the settings
settings = Settings()

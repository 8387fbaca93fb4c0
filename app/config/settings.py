"""
Application settings.

Loads configuration from environment variables using pydantic-settings.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.config.constants import (
    DEFAULT_HTTP_TIMEOUT_SECONDS,
    GLOBAL_POINTS_STORAGE_KEY,
    PRICE_API_URL,
    PRICE_ASSET_ID,
    PRICE_VS_CURRENCY,
    STAKING_API_URL,
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Remote APIs
    staking_api_url: str = STAKING_API_URL
    price_api_url: str = PRICE_API_URL
    price_asset_id: str = PRICE_ASSET_ID
    price_vs_currency: str = PRICE_VS_CURRENCY
    http_timeout_seconds: float = Field(
        default=DEFAULT_HTTP_TIMEOUT_SECONDS,
        gt=0,
        description="Total timeout for one remote API request in seconds"
    )

    # Redis (persisted global staking points)
    redis_host: str = "localhost"
    redis_port: int = 6379
    redis_password: str | None = None
    redis_db: int = 0
    global_points_key: str = GLOBAL_POINTS_STORAGE_KEY

    # Web server
    web_host: str = "0.0.0.0"
    web_port: int = Field(
        default=8080, ge=1, le=65535, description="Estimator HTTP server port"
    )

    # Application
    log_level: str = "INFO"
    log_file: str | None = Field(
        default="logs/estimator.log",
        description="Rotating log file path, empty to log to stderr only"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator('staking_api_url', 'price_api_url')
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        """Validate remote API URL scheme."""
        if not v.startswith(('http://', 'https://')):
            raise ValueError(
                f'Invalid API URL: {v}. Must start with http:// or https://'
            )
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize log level name."""
        level = v.upper()
        if level not in ('TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL'):
            raise ValueError(f'Invalid log level: {v}')
        return level

    @field_validator('log_file')
    @classmethod
    def validate_log_file(cls, v: str | None) -> str | None:
        """Treat empty log file path as disabled."""
        if v is not None and not v.strip():
            return None
        return v


# Global settings instance
settings = Settings()

"""
Configuration settings for the Startup Idea Validator.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Application ===
    APP_NAME: str = "Startup Idea Validator"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"
    CORS_ALLOW_ORIGINS: list[str] = ["*"]

    # === Primary agent (required for /api/validate) ===
    LYZR_API_KEY: Optional[str] = None
    LYZR_AGENT_ID: Optional[str] = None
    LYZR_API_ENDPOINT: str = "https://api.lyzr.ai/v1/chat/completions"
    UPSTREAM_TIMEOUT: float = 120.0  # seconds, agents can be slow

    # === Secondary agent (all three or the call is skipped) ===
    SECONDARY_API_KEY: Optional[str] = None
    SECONDARY_AGENT_ID: Optional[str] = None
    SECONDARY_API_URL: Optional[str] = None

    # === Client ===
    VALIDATION_API_BASE_URL: str = "http://localhost:8000"
    CLIENT_TIMEOUT: float = 150.0
    SECONDARY_VALIDATION_ENABLED: bool = True

    # === Retry ===
    MAX_RETRIES: int = 2  # retries after the first attempt
    RETRY_BASE_DELAY: float = 1.0  # seconds, doubled per attempt

    @property
    def primary_configured(self) -> bool:
        return bool(self.LYZR_API_KEY and self.LYZR_AGENT_ID)

    @property
    def secondary_configured(self) -> bool:
        return bool(
            self.SECONDARY_API_KEY and self.SECONDARY_AGENT_ID and self.SECONDARY_API_URL
        )


# Global settings instance
settings = Settings()

"""
Base settings loaded from the environment and an optional .env file.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        PATH_GENERATION_TIMEOUT: float = 30.0

    settings = Settings()
    print(settings.STORAGE_BACKEND)
"""

from typing import List, Optional
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_BACKENDS = ("memory", "file")
AI_PROVIDERS = ("claude", "openai")


class BaseAppSettings(BaseSettings):
    """
    Settings shared by every app: storage, AI provider and server.
    """

    # ==========================================================================
    # Storage
    # ==========================================================================
    STORAGE_BACKEND: str = "memory"  # "memory" or "file"
    STORAGE_PATH: str = "./data"  # Directory for the file backend

    # ==========================================================================
    # AI Provider
    # ==========================================================================
    AI_PROVIDER: str = "claude"  # "claude" or "openai"
    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",
        case_sensitive=True,
    )

    @field_validator("STORAGE_BACKEND", "AI_PROVIDER", "ENVIRONMENT")
    @classmethod
    def _lowercase(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def _uppercase(cls, value: str) -> str:
        return value.strip().upper()

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def is_development(self) -> bool:
        return self.ENVIRONMENT == "development"

    def ai_api_key(self) -> Optional[str]:
        """API key of the selected provider, if configured."""
        if self.AI_PROVIDER == "openai":
            return self.OPENAI_API_KEY
        return self.CLAUDE_API_KEY

    def validate_required(self) -> None:
        """
        Check that the configuration is usable.

        Raises:
            ValueError: Listing every problem found
        """
        errors = []

        if self.STORAGE_BACKEND not in STORAGE_BACKENDS:
            errors.append(f"Unknown STORAGE_BACKEND: {self.STORAGE_BACKEND}")

        if self.AI_PROVIDER not in AI_PROVIDERS:
            errors.append(f"Unknown AI_PROVIDER: {self.AI_PROVIDER}")
        elif not self.ai_api_key():
            errors.append(f"{self.AI_PROVIDER.upper()}_API_KEY is required when AI_PROVIDER={self.AI_PROVIDER}")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))

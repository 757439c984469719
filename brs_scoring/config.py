"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Scoring engine settings, read from the environment or a .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "BRS Scoring Engine"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # Normative tables
    STRICT_NORMATIVE_TABLES: bool = Field(
        default=False,
        description="Raise on a missing normative table instead of scoring against the fallback ranges",
    )

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Production must not emit per-dimension debug logs."""
        if self.APP_ENV == "production" and self.LOG_LEVEL == "DEBUG":
            raise ValueError("LOG_LEVEL must not be DEBUG in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()

settings = get_settings()

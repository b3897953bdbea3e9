"""
Configuration Module

This module provides configuration settings for the document intelligence engine.
It loads environment variables from a .env file and provides default values.

"""

import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import List

# Load environment variables from .env file
load_dotenv()

PACKAGE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def parse_cors_origins(env_value: str) -> List[str]:
    """Parse CORS_ORIGINS from a comma-separated environment variable"""
    origins = [origin.strip() for origin in (env_value or "").split(",") if origin.strip()]
    return origins or ["http://localhost:3000"]


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables with defaults.
    Settings are validated using Pydantic's BaseSettings.
    """

    model_config = SettingsConfigDict(
        env_file=os.path.join(PACKAGE_ROOT, "../../.env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Allow extra fields from .env file
    )

    # Core settings
    PROJECT_NAME: str = "Document Intelligence Engine"
    VERSION: str = "1.0.0"

    # Environment
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")

    # CORS Settings (comma-separated)
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173")

    # Stage requirement catalog
    CATALOG_PATH: str = os.getenv("CATALOG_PATH", os.path.join(PACKAGE_ROOT, "data", "stage_catalog.json"))

    # Redis result cache
    REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
    CACHE_ENABLED: bool = os.getenv("CACHE_ENABLED", "True").lower() == "true"
    CACHE_TTL_SECONDS: int = int(os.getenv("CACHE_TTL_SECONDS", "3600"))

    # Logging configuration
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOGS_DIR: str = os.getenv("LOGS_DIR", os.path.join(PACKAGE_ROOT, "logs"))

    @property
    def cors_origin_list(self) -> List[str]:
        return parse_cors_origins(self.CORS_ORIGINS)


# Create settings instance
settings = Settings()


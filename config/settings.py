"""
Application settings and environment configuration.

Purpose:
- Centralize logging config for the two example programs
- Load from environment variables (or a local .env file)
- Provide quiet defaults so the example output on stdout stays exact
"""
import os
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    APP_TITLE: str = "Transport Patterns"

    # Logging: records go to stderr, never stdout
    # Values: DEBUG, INFO, WARNING, ERROR, CRITICAL
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "WARNING")
    LOG_FORMAT: str = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )

    class Config:
        env_file = ".env"  # Load from .env file if present
        extra = "ignore"

# Global settings instance
settings = Settings()

"""
Configuration management for the redirect server.
Supports environment variables and a .env file.
"""
import os
from typing import Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # Rule files (overridden by --yaml / --json)
    yaml_path: Optional[str] = os.getenv("URLSHORT_YAML", None)
    json_path: Optional[str] = os.getenv("URLSHORT_JSON", None)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()

"""Application configuration settings."""
from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Coin feed
    crypto_list_url: str = "https://37656be98b8f42ae8348e4da3ee3193f.api.mockbin.io/"
    request_timeout: Optional[float] = None  # None keeps the transport default

    # API settings
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    enable_docs: bool = True

    # Logging
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_timezone: str = "UTC"

    class Config:
        env_file = ".env"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

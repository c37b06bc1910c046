"""Configuration and settings"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Server
    backend_host: str = "localhost"
    backend_port: int = 8000

    # Frontend allowed by CORS
    frontend_url: str = "http://localhost:3000"

    # Logging
    log_level: str = "INFO"

    # Request limits
    max_prompt_chars: int = Field(default=10000, gt=0)

    # API Configuration
    api_title: str = "Landing Page Synthesizer API"
    api_version: str = "0.1.0"


# Global settings instance
settings = Settings()

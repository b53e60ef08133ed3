"""
Application configuration management.
"""

from pydantic_settings import BaseSettings
from typing import Literal, Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    padded_blocks: Literal["always", "never"] = "always"
    config_file: Optional[str] = None  # YAML rule configuration, overrides padded_blocks

    # Application
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "PADCHECK_"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()

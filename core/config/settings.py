"""Core configuration settings using Pydantic BaseSettings."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Environment
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Logging level")

    # Release reported by GET /
    release: str = Field(default="NotSet", description="Deployed release identifier")

    # Listener
    host: str = Field(default="0.0.0.0", description="Interface the service binds to")
    app_port: str = Field(default="8080", description="Port the service listens on")

    @property
    def port(self) -> int:
        """Get the listening port as an integer."""
        return int(self.app_port)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

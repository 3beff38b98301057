"""Configuration for the log query service, loaded from environment variables."""

import logging

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings. Every field can be set as LOGQUERY_<NAME>."""

    model_config = SettingsConfigDict(
        env_prefix="LOGQUERY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    environment: str = Field(default="development", description="Deployment environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Root log level")

    # Server
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8000, description="Bind port")

    # CORS
    cors_allowed_origins: str = Field(
        default="*", description="Comma-separated list of allowed origins"
    )

    # Security
    admin_api_key: str = Field(
        default="", description="X-API-Key required to replace dynamic domains (empty = open)"
    )

    # Limits
    max_query_length: int = Field(default=2000, ge=1, description="Maximum query length accepted")

    # Initial dynamic domains, comma-separated
    initial_workflows: str = Field(default="", description="Workflow names to seed autocomplete")
    initial_folders: str = Field(default="", description="Folder names to seed autocomplete")

    @property
    def cors_origins_list(self) -> list[str]:
        return _split_csv(self.cors_allowed_origins)

    @property
    def initial_workflows_list(self) -> list[str]:
        return _split_csv(self.initial_workflows)

    @property
    def initial_folders_list(self) -> list[str]:
        return _split_csv(self.initial_folders)


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


settings = Settings()

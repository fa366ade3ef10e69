"""Configuration management using pydantic-settings."""

from dataclasses import dataclass
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, description="Server port")
    debug: bool = Field(default=False, description="Debug mode")
    base_url: str = Field(default="http://localhost:3000", description="Public base URL used in permalinks")

    # MCP Configuration
    server_name: str = Field(default="omniconvo", description="Server name reported to MCP clients")
    server_version: str = Field(default="1.0.0", description="Server version reported to MCP clients")
    conversation_model: str = Field(default="Claude", description="Platform label stored on saved conversations")

    # Persistence Configuration
    database_path: str = Field(default="./data/omniconvo.db", description="DuckDB database file")
    storage_path: str = Field(default="./data/storage", description="Root directory for conversation content")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[str] = Field(default="./logs/omniconvo.log", description="Log file path")


@dataclass(frozen=True)
class DatabaseConfig:
    """Record store configuration."""

    path: str


@dataclass(frozen=True)
class StorageConfig:
    """Content store configuration."""

    base_path: str


@dataclass(frozen=True)
class AppConfig:
    """Configuration consumed by the runtime on first initialization."""

    database: DatabaseConfig
    storage: StorageConfig
    base_url: str
    model: str = "Claude"


def load_config(source: Optional[Settings] = None) -> AppConfig:
    """
    Build the runtime configuration from settings.

    Args:
        source: Settings instance, defaults to the process settings

    Returns:
        AppConfig instance
    """
    source = source or settings
    return AppConfig(
        database=DatabaseConfig(path=source.database_path),
        storage=StorageConfig(base_path=source.storage_path),
        base_url=source.base_url.rstrip("/"),
        model=source.conversation_model,
    )


# Global settings instance
settings = Settings()

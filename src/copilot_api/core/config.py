"""
Configuration management for copilot-api.

This module handles all client configuration using Pydantic Settings
for environment variable management and validation.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AuthConfig(BaseSettings):
    """Authentication configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="forbid"
    )

    token_url: str = Field(
        default="https://api.github.com/copilot_internal/v2/token",
        description="Endpoint exchanging a personal token for an access token"
    )
    refresh_margin: int = Field(
        default=300,
        description="Seconds before expiry at which the access token is refreshed",
        ge=0,
        le=3600
    )
    context: str = Field(
        default="default",
        description="Credential store key for the host context",
        min_length=1
    )


class APIConfig(BaseSettings):
    """Chat API configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="API_",
        case_sensitive=False,
        extra="forbid"
    )

    chat_url: str = Field(
        default="https://api.githubcopilot.com/chat/completions",
        description="Chat completion endpoint"
    )
    request_timeout: int = Field(
        default=60,
        description="Request timeout in seconds",
        ge=1,
        le=600
    )

    # Integration headers expected by the chat backend
    integration_id: str = Field(
        default="vscode-chat",
        description="Copilot-Integration-Id header"
    )
    editor_version: str = Field(
        default="vscode/1.97.0",
        description="Editor-Version header"
    )
    editor_plugin_version: str = Field(
        default="copilot-chat/0.22.2",
        description="Editor-Plugin-Version header"
    )
    user_agent: str = Field(
        default="GitHubCopilotChat/0.22.2",
        description="User-Agent header"
    )


class ChatConfig(BaseSettings):
    """Plugin-wide chat settings."""

    model_config = SettingsConfigDict(
        env_prefix="CHAT_",
        case_sensitive=False,
        extra="forbid"
    )

    selected_model: Optional[str] = Field(
        default=None,
        description="Model value selected in the chat view"
    )
    system_prompt: Optional[str] = Field(
        default=None,
        description="Default system prompt used when a call supplies none"
    )


class LoggingConfig(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
        extra="forbid"
    )

    level: str = Field(
        default="INFO",
        description="Logging level"
    )
    format: str = Field(
        default="json",
        description="Log format (json or text)"
    )
    file_path: Optional[str] = Field(
        default=None,
        description="Log file path (optional)"
    )
    max_file_size: int = Field(
        default=10485760,  # 10MB
        description="Maximum log file size in bytes",
        ge=1048576,  # 1MB
        le=104857600  # 100MB
    )
    backup_count: int = Field(
        default=5,
        description="Number of backup log files",
        ge=1,
        le=20
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v.upper()

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        valid_formats = {"json", "text"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return v.lower()


class Settings(BaseSettings):
    """Main client settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Directory for the file credential store
    data_dir: Path = Field(
        default=Path("./data"),
        description="Data directory path"
    )

    # Sub-configurations
    auth: AuthConfig = Field(default_factory=AuthConfig)
    api: APIConfig = Field(default_factory=APIConfig)
    chat: ChatConfig = Field(default_factory=ChatConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get client settings."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment."""
    global settings
    settings = Settings()
    return settings

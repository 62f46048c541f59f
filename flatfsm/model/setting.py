"""
Global settings management using Pydantic.

This module provides a singleton Settings class that loads configuration
from `FLATFSM_` prefixed environment variables and an optional .env file.
"""
import os
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_env_file() -> str | None:
    """
    Find the .env file.

    Search order:
    1. Path specified by FLATFSM_ENV_FILE environment variable
    2. Current working directory (.env)

    Returns:
        str | None: Path to .env file if found, None otherwise
    """
    custom_path = os.getenv('FLATFSM_ENV_FILE')
    if custom_path and Path(custom_path).exists():
        return custom_path

    env_file = Path.cwd() / '.env'
    if env_file.exists():
        return str(env_file)

    return None


class Settings(BaseSettings):
    """Global library settings."""

    model_config = SettingsConfigDict(
        env_prefix="FLATFSM_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    def __init__(self, **kwargs: Any):
        """Initialize Settings, reading the .env file when one is found."""
        env_file_path = _find_env_file()
        if env_file_path and "_env_file" not in kwargs:
            kwargs["_env_file"] = env_file_path
        super().__init__(**kwargs)

    pool_max_idle: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of idle state machines kept by the default pool, None for unbounded"
    )

    flowchart_initial_color: str = Field(
        default="#aaaaaa",
        description="Fill color of the initial state in Mermaid flowcharts"
    )

    flowchart_current_color: str = Field(
        default="#ff0000",
        description="Fill color of the current state in Mermaid flowcharts"
    )


# Global singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global singleton Settings instance.

    Creates the instance on first call, subsequent calls return the same instance.

    Returns:
        Settings: The global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings from environment variables.

    This is useful for testing or when environment variables change at runtime.

    Returns:
        Settings: The new settings instance
    """
    global _settings
    _settings = Settings()
    return _settings

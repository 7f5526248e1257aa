"""
Application Configuration Models

Server, data source and logging settings, loaded from environment variables.
"""

import os

from pydantic import BaseModel, Field, field_validator

from ..constants import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT, get_mock_data_path


class AppConfig(BaseModel):
    """
    Process-wide configuration for the chat session backend.
    Every field can be overridden through the environment, see load_config_from_env.
    """

    # === Server ===
    host: str = Field(default=DEFAULT_HOST, title="Bind Host")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, title="Listen Port")
    debug: bool = Field(default=False, title="Debug Mode", description="Enables auto-reload and debug logging")

    # === CORS ===
    cors_origins: list[str] = Field(
        default_factory=lambda: ["*"],
        title="Allowed Origins",
        description="Origins allowed to call the API. '*' allows any origin.",
    )

    # === Mock Answer Source ===
    mock_data_path: str = Field(
        default_factory=get_mock_data_path,
        title="Mock Data Path",
        description="JSON file holding the canned answer payload, re-read on every question",
    )

    # === Logging ===
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, title="Log Level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


def _parse_bool(value: str | None) -> bool:
    return (value or "").strip().lower() in ["true", "1", "yes"]


def _parse_list(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def create_app_config(**overrides) -> AppConfig:
    """Create a configuration with the given overrides on top of the defaults."""
    return AppConfig(**overrides)


def load_config_from_env() -> AppConfig:
    """Load configuration from environment variables (fallback to defaults)."""
    overrides = {}

    if os.getenv("HOST"):
        overrides["host"] = os.getenv("HOST")
    if os.getenv("PORT"):
        overrides["port"] = int(os.getenv("PORT"))
    if os.getenv("DEBUG"):
        overrides["debug"] = _parse_bool(os.getenv("DEBUG"))
    if os.getenv("CORS_ORIGINS"):
        overrides["cors_origins"] = _parse_list(os.getenv("CORS_ORIGINS"))
    if os.getenv("MOCK_DATA_PATH"):
        overrides["mock_data_path"] = os.getenv("MOCK_DATA_PATH")
    if os.getenv("LOG_LEVEL"):
        overrides["log_level"] = os.getenv("LOG_LEVEL")

    return create_app_config(**overrides)

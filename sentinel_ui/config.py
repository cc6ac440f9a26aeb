"""Configuration module for the sentinel dashboard."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Config(BaseSettings):
    """Configuration for the sentinel dashboard."""

    model_config = SettingsConfigDict(env_prefix="SENTINEL_", extra="forbid")

    # Daemon connection
    ipc_socket_path: str = Field(default="/tmp/system-sentinel.soc")
    reconnect_delay_seconds: float = Field(default=5.0)

    # Assistant backend
    claude_binary: str = Field(default="claude")

    # Runtime options
    log_level: str = Field(default="INFO")

    @field_validator("reconnect_delay_seconds")
    def validate_reconnect_delay(cls, v):
        """Validate reconnect delay."""
        if v <= 0:
            raise ValueError("Reconnect delay must be positive")
        return v

    @field_validator("log_level")
    def validate_log_level(cls, v):
        """Validate log level."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

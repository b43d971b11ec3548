"""
Configuration management for rozmarra.

Uses Pydantic for type-safe, validated configuration with environment variable support.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class RozmarraSettings(BaseSettings):
    """Runtime configuration for rozmarra.

    The calculators themselves are not configurable; only the logging
    around them is.

    Settings can be overridden via:
    1. Environment variables (prefixed with ROZ_)
    2. .env file in project root
    3. Programmatic overrides

    Example:
        export ROZ_LOG_LEVEL=DEBUG
        export ROZ_LOG_TO_FILE=true
    """

    # === Paths ===
    project_root: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent.parent,
        description="Project root directory",
    )
    logs_dir: Path = Field(default=Path("logs"), description="Log files directory")

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_rotation: str = Field(default="10 MB", description="Log file rotation size")
    log_retention: str = Field(
        default="10 days", description="Log file retention period"
    )
    log_to_file: bool = Field(default=False, description="Enable file logging")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("logs_dir", mode="before")
    @classmethod
    def resolve_path(cls, v, info):
        """Resolve paths relative to project root."""
        if isinstance(v, str):
            v = Path(v)
        if not v.is_absolute() and info.data.get("project_root"):
            v = info.data["project_root"] / v
        return v

    model_config = {
        "env_prefix": "ROZ_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "validate_default": True,
    }


# Global settings instance
settings = RozmarraSettings()


def reload_settings() -> RozmarraSettings:
    """Reload settings from environment and .env file.

    Useful for testing or runtime configuration changes.
    """
    global settings
    settings = RozmarraSettings()
    return settings

"""
argcheck Settings Configuration

Centralized configuration using Pydantic settings.
Configuration is loaded from the environment and .env by default; YAML loading is supported.
"""

from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration: level and format (json/console)."""

    model_config = SettingsConfigDict(env_prefix="LOG_", extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_format: str = Field(default="console", description="Format: 'json' or 'console'")

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        allowed = ("json", "console")
        if v.lower() not in allowed:
            raise ValueError(f"log_format must be one of {allowed}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u


class CheckSettings(BaseSettings):
    """Argument check behaviour."""

    model_config = SettingsConfigDict(env_prefix="ARGCHECK_", extra="ignore")

    log_failures: bool = Field(
        default=False,
        description="Log every rejected argument at debug level before raising",
    )


class Settings(BaseSettings):
    """
    Root settings class. Loads from .env by default; supports creation from YAML.

    Nested models: logging, checks.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings, description="Logging config")
    checks: CheckSettings = Field(default_factory=CheckSettings, description="Argument check config")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """
        Create Settings from a YAML file. Top-level keys should match
        nested model names (logging, checks).
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        kwargs: dict[str, Any] = {}
        for name, model_class in [
            ("logging", LoggingSettings),
            ("checks", CheckSettings),
        ]:
            if name in data and isinstance(data[name], dict):
                kwargs[name] = model_class.model_validate(data[name])
        return cls(**kwargs)


# Global settings instances
_settings: Optional[Settings] = None
_check_settings: Optional[CheckSettings] = None


def get_settings() -> Settings:
    """Get or create the global settings instance (loads from .env)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def get_check_settings() -> CheckSettings:
    """
    Get or create the CheckSettings used by the checker.

    Reads only ARGCHECK_ environment variables; no .env file is opened.
    An invalid value raises ValidationError and is not cached.
    """
    global _check_settings
    if _check_settings is None:
        _check_settings = CheckSettings()
    return _check_settings


def reload_settings() -> Settings:
    """Force reload of settings from environment."""
    global _settings, _check_settings
    _settings = Settings()
    _check_settings = None
    return _settings

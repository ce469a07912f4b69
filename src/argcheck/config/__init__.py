"""Configuration for argcheck."""

from argcheck.config.settings import (
    CheckSettings,
    LoggingSettings,
    Settings,
    get_check_settings,
    get_settings,
    reload_settings,
)

__all__ = ["CheckSettings", "LoggingSettings", "Settings", "get_check_settings", "get_settings", "reload_settings"]

"""Configuration management using pydantic-settings."""

from .settings import (
    FallibleSettings,
    LoggingSettings,
    ResultSettings,
    clear_settings_cache,
    get_result_settings,
    get_settings,
)

__all__ = [
    "FallibleSettings",
    "LoggingSettings",
    "ResultSettings",
    "clear_settings_cache",
    "get_result_settings",
    "get_settings",
]

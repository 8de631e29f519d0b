"""Environment-based configuration using pydantic-settings.

Example:
    >>> from fallible.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.result.predicate_failure_message
    'Predicate not satisfied'
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # FALLIBLE_RESULT_CAPTURE_HANDLER_TRACES=true
    # FALLIBLE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Annotated, Literal

from pydantic import Field, ValidationError, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("fallible.config")


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "none"] = "console"

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        """Accept level names in any case."""
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class ResultSettings(BaseSettings):
    """Behaviour knobs for Result combinators."""

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_RESULT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    predicate_failure_message: Annotated[str, Field(min_length=1)] = Field(
        default="Predicate not satisfied",
        description="Failure payload used by filter() when no failure provider is given",
    )
    capture_handler_traces: bool = Field(
        default=False,
        description="Attach the traceback text to HandlerFault.details",
    )
    log_handler_faults: bool = Field(
        default=True,
        description="Log a warning when a side-effect handler raises",
    )


class FallibleSettings(BaseSettings):
    """Root settings for fallible.

    Loads configuration from environment variables with FALLIBLE_ prefix.

    Example environment variables:
        FALLIBLE_DEBUG=true
        FALLIBLE_LOG_FORMAT=json
        FALLIBLE_RESULT_PREDICATE_FAILURE_MESSAGE="value rejected"
    """

    model_config = SettingsConfigDict(
        env_prefix="FALLIBLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    # Nested settings (loaded with FALLIBLE_LOG_, FALLIBLE_RESULT_)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    result: ResultSettings = Field(default_factory=ResultSettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """DEBUG when debug mode is on, otherwise the configured level."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> FallibleSettings:
    """Get the global settings instance (cached)."""
    return FallibleSettings()


@lru_cache(maxsize=1)
def get_result_settings() -> ResultSettings:
    """Get the Result combinator settings (cached).

    Reads only FALLIBLE_RESULT_ variables, so a bad logging setting never
    reaches a combinator. Invalid values fall back to the defaults with a
    warning; combinators do not raise on configuration.
    """
    try:
        return ResultSettings()
    except ValidationError as exc:
        logger.warning(
            "invalid FALLIBLE_RESULT_ settings, using defaults: %s", exc.errors(include_url=False),
            extra={"error_count": exc.error_count()},
        )
        return ResultSettings.model_construct()


def clear_settings_cache() -> None:
    """Clear the settings caches so the next lookup re-reads the environment."""
    get_settings.cache_clear()
    get_result_settings.cache_clear()

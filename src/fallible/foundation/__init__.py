"""Foundation: fault types and configuration shared by the monads and runtime layers."""

from .config import (
    FallibleSettings,
    LoggingSettings,
    ResultSettings,
    clear_settings_cache,
    get_result_settings,
    get_settings,
)
from .errors import Displayable, FaultKind, HandlerFault, UnwrapError, describe

__all__ = [
    # Config
    "FallibleSettings", "LoggingSettings", "ResultSettings", "clear_settings_cache", "get_result_settings", "get_settings",
    # Errors
    "Displayable", "FaultKind", "HandlerFault", "UnwrapError", "describe",
]

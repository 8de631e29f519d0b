"""Runtime support: settlement of concurrent awaitables and logging setup."""

from .concurrency import Settled, SettledStatus, fulfilled, gather_settled, rejected
from .logging import ConsoleFormatter, JsonFormatter, configure_logging

__all__ = [
    # Concurrency
    "Settled", "SettledStatus", "gather_settled", "fulfilled", "rejected",
    # Logging
    "ConsoleFormatter", "JsonFormatter", "configure_logging",
]

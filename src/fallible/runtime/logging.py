"""Logging setup for fallible.

Library modules log through stdlib loggers under the ``fallible`` namespace and
never install handlers on import. Applications that want to see those records
call ``configure_logging`` once at startup:

    >>> from fallible.runtime.logging import configure_logging
    >>> configure_logging(format="console", level="DEBUG")  # or "json" for production

Structured context is passed with ``extra=`` and rendered as ``key=value``
pairs (console) or merged into the JSON object (json).
"""

from __future__ import annotations

import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

import orjson

from fallible.foundation.config import get_settings

ROOT_LOGGER = "fallible"

# Attributes present on every LogRecord; anything else came in via extra=
_RESERVED = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime", "taskName"}


def _extra(record: logging.LogRecord) -> dict[str, object]:
    return {k: v for k, v in vars(record).items() if k not in _RESERVED and not k.startswith("_")}


class ConsoleFormatter(logging.Formatter):
    """Human-readable output. Format: HH:MM:SS.mmm [level] logger: message key=value ..."""

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=UTC).strftime("%H:%M:%S.%f")[:-3]
        parts = [ts, f"[{record.levelname.lower()}]", f"{record.name}:", record.getMessage()]
        parts += [f"{k}={v!r}" if isinstance(v, str) else f"{k}={v}" for k, v in sorted(_extra(record).items())]
        line = " ".join(parts)
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


class JsonFormatter(logging.Formatter):
    """JSON Lines output for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
            **_extra(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return orjson.dumps(payload, default=str, option=orjson.OPT_NON_STR_KEYS).decode()


def configure_logging(
    format: str | None = None,  # noqa: A002 - shadows builtin but matches stdlib
    level: str | None = None,
    *,
    output: TextIO | None = None,
) -> logging.Logger:
    """Attach a single handler to the ``fallible`` logger.

    Defaults come from settings (FALLIBLE_LOG_FORMAT, FALLIBLE_LOG_LEVEL, FALLIBLE_DEBUG).
    Format: "console" (human), "json" (machine), "none" (silence). Calling again
    replaces the previously installed handler.
    """
    settings = get_settings()
    fmt = (format or settings.logging.format).lower()
    lvl = (level or settings.effective_log_level).upper()

    match fmt:
        case "console": formatter: logging.Formatter | None = ConsoleFormatter()
        case "json": formatter = JsonFormatter()
        case "none": formatter = None
        case _: raise ValueError(f"Unknown format: {fmt}. Use 'console', 'json', or 'none'")

    logger = logging.getLogger(ROOT_LOGGER)
    for handler in [h for h in logger.handlers if getattr(h, "_fallible", False)]:
        logger.removeHandler(handler)

    handler: logging.Handler
    if formatter is None:
        handler = logging.NullHandler()
    else:
        handler = logging.StreamHandler(output or (sys.stdout if fmt == "json" else sys.stderr))
        handler.setFormatter(formatter)
    handler._fallible = True  # type: ignore[attr-defined]

    logger.addHandler(handler)
    logger.setLevel(getattr(logging, lvl, logging.WARNING))
    logger.propagate = False
    return logger

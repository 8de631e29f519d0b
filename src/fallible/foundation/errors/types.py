"""The failure-payload capability shared by Result operations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Displayable(Protocol):
    """Anything that converts to a human-readable string.

    Failure payloads carry this capability. It is needed where a failure is
    turned into an exception message (``get_or_raise``) or where a default
    failure is produced (``filter``).
    """

    def __str__(self) -> str: ...


def describe(failure: object) -> str:
    """String form of a failure payload, tolerant of a broken ``__str__``."""
    try:
        return str(failure)
    except Exception:  # noqa: BLE001 - fall back to repr for unprintable payloads
        return repr(failure)

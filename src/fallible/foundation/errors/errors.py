"""Fault taxonomy for fallible.

Domain failures are data carried by a Result. The types here cover the few
places where something goes wrong around that data: a side-effect handler
raising, an explicit unwrap of a failure, and rejected pending computations.
Uses Pydantic for the structured fault payload.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, ConfigDict, Field

from .types import describe


class FaultKind(StrEnum):
    """Where a fault originated."""
    HANDLER = "HANDLER"
    UNWRAP = "UNWRAP"
    AGGREGATION = "AGGREGATION"


class HandlerFault(BaseModel):
    """Failure payload produced when an ``on_success``/``on_failure``/``always`` handler raises.

    Example:
        >>> fault = HandlerFault.from_exception("on_success", ValueError("boom"))
        >>> str(fault)
        'Result.on_success handler raised an error; error: boom'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    operation: str = Field(min_length=1)
    message: str
    exc_type: str
    kind: FaultKind = FaultKind.HANDLER
    details: str | None = Field(default=None, repr=False)

    @classmethod
    def from_exception(cls, operation: str, exc: BaseException, *, include_trace: bool = False) -> Self:
        """Build fault from the exception a handler raised."""
        return cls(
            operation=operation,
            message=describe(exc),
            exc_type=type(exc).__name__,
            details="".join(traceback.format_exception(exc)) if include_trace else None,
        )

    def render(self, *, include_details: bool = False) -> str:
        """Human-readable description of the fault."""
        text = f"Result.{self.operation} handler raised an error; error: {self.message}"
        if include_details and self.details:
            return f"{text}\nDetails:\n{self.details}"
        return text

    def __str__(self) -> str:
        return self.render()


class UnwrapError(RuntimeError):
    """Raised by ``get_or_raise`` when the Result holds a failure.

    The message is the failure's string form; the payload itself stays
    available on ``failure``.
    """

    __slots__ = ("failure",)
    kind = FaultKind.UNWRAP

    def __init__(self, failure: object) -> None:
        self.failure = failure
        super().__init__(describe(failure))

"""Fault types and capabilities for fallible.

- FaultKind: Origin of a fault (handler, unwrap, aggregation)
- HandlerFault: Failure payload for a raising side-effect handler
- UnwrapError: The exception raised by an explicit unwrap of a failure
- Displayable: The string-conversion capability required of failure payloads
"""

from .errors import FaultKind, HandlerFault, UnwrapError
from .types import Displayable, describe

__all__ = [
    # Faults
    "FaultKind", "HandlerFault", "UnwrapError",
    # Capabilities
    "Displayable", "describe",
]

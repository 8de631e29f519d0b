"""fallible - explicit, composable handling of absent values and failing operations.

Replaces exceptions, None checks, sentinel values and (value, error) tuples
with two immutable wrappers that make callers handle both outcomes.

Quick Start:
    >>> from fallible import success_result, failure_result, for_each_element
    >>>
    >>> def parse(s: str):
    ...     return success_result(int(s)) if s.isdigit() else failure_result(f"invalid: {s}")
    >>>
    >>> parse("21").map(lambda n: n * 2).get_or_raise()
    42
    >>> for_each_element(["1", "x", "3"], parse)
    Failure(['invalid: x'])

Optional values:
    >>> from fallible import Optional
    >>> Optional.of_nullable(None).map(str.upper).get_or_else("n/a")
    'n/a'

Async fan-out:
    >>> from fallible import for_each_promise
    >>> combined = await for_each_promise(user_ids, fetch_user)  # Result[list[User], list[...]]
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Errors
from .foundation.errors import Displayable, FaultKind, HandlerFault, UnwrapError

# Config
from .foundation.config import FallibleSettings, clear_settings_cache, get_settings

# Monads
from .monads import (
    Optional,
    Result,
    failure_result,
    for_each_element,
    for_each_promise,
    for_each_result,
    reduce_to_result,
    result_from_all,
    result_from_any,
    success_result,
)

# Logging
from .runtime.logging import configure_logging

logging.getLogger("fallible").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Types
    "Result", "Optional",
    # Constructors
    "success_result", "failure_result",
    # Aggregation
    "result_from_all", "result_from_any", "for_each_result", "for_each_element", "reduce_to_result",
    # Async
    "for_each_promise",
    # Errors
    "Displayable", "FaultKind", "HandlerFault", "UnwrapError",
    # Config & logging
    "FallibleSettings", "get_settings", "clear_settings_cache", "configure_logging",
]

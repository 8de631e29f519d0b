"""Result and Optional value wrappers.

Example:
    >>> from fallible.monads import Result, success_result, failure_result
    >>>
    >>> def divide(a: int, b: int) -> Result[float, str]:
    ...     if b == 0:
    ...         return failure_result("division by zero")
    ...     return success_result(a / b)
    >>>
    >>> result = (
    ...     divide(10, 2)
    ...     .map(lambda x: x * 2)
    ...     .flat_map(lambda x: success_result(x + 1))
    ... )
    >>> assert result.get_or_raise() == 11.0
"""

from .collect import for_each_element, for_each_result, reduce_to_result, result_from_all, result_from_any
from .concurrent import for_each_promise
from .optional import Optional
from .result import Result, failure_result, success_result

__all__ = [
    # Core types
    "Result",
    "Optional",
    # Constructors
    "success_result",
    "failure_result",
    # Aggregation
    "result_from_all",
    "result_from_any",
    "for_each_result",
    "for_each_element",
    "reduce_to_result",
    # Async
    "for_each_promise",
]

"""Result type for structured error handling without exceptions.

Every parser in ``records.parser`` returns a Result, so a service can tell
"bad input, return the sentinel" apart from a real bug without try/except.
"""

from typing import TypedDict, Optional, TypeVar, Callable, Any

T = TypeVar("T")


class Result(TypedDict):
    """Result type for operations that can succeed or fail.

    The 'value' field is typed as Any because TypedDict cannot be generic
    on Python 3.9.

    Attributes:
        ok: True if operation succeeded, False if it failed
        value: The successful result value (None if failed)
        error: Reason for the failure (None if succeeded)
    """

    ok: bool
    value: Optional[Any]
    error: Optional[str]


def success(value: T) -> Result:
    """Create a successful result.

    Args:
        value: The successful result value

    Returns:
        Result with ok=True and the value
    """
    return Result(ok=True, value=value, error=None)


def failure(error: str) -> Result:
    """Create a failed result.

    Args:
        error: Reason describing the failure

    Returns:
        Result with ok=False and the reason
    """
    return Result(ok=False, value=None, error=error)


def unwrap(result: Result) -> Any:
    """Extract value from Result or raise error.

    Args:
        result: Result to unwrap

    Returns:
        The value if ok=True

    Raises:
        ValueError: If ok=False
    """
    if result["ok"]:
        return result["value"]
    raise ValueError(result["error"])


def unwrap_or(result: Result, default: Any) -> Any:
    """Extract value from Result or return default."""
    if result["ok"]:
        return result["value"]
    return default


def map_result(result: Result, func: Callable[[Any], Any]) -> Result:
    """Apply function to successful result value.

    Unlike parsing, a transform is expected to succeed: exceptions raised by
    ``func`` propagate to the caller.

    Args:
        result: Input result
        func: Function to apply to value

    Returns:
        New result with transformed value, or the original failure
    """
    if result["ok"]:
        return success(func(result["value"]))
    return failure(result["error"])

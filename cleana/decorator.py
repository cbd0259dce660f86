"""
The @cleaner decorator for cleaning a function's return value.
"""

from functools import wraps
from typing import Any, Callable

from .process import clean


def cleaner(_func: Callable | None = None, **options: Any) -> Callable:
    """
    Decorator that passes a function's return value through clean().

    Can be used with or without arguments:
        @cleaner
        def build_payload(user): ...

        @cleaner(clean_null=False, remove_keys=["password"])
        def build_payload(user): ...

    Args:
        **options: Options forwarded to clean() on every call

    Returns:
        Decorated function whose result is cleaned.
    """

    def decorator(func: Callable) -> Callable:
        if not callable(func):
            raise TypeError(
                f"@cleaner expects a callable, got {type(func).__name__}"
            )

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return clean(func(*args, **kwargs), **options)

        return wrapper

    # Handle both @cleaner and @cleaner(...) syntax
    if _func is not None:
        return decorator(_func)
    else:
        return decorator

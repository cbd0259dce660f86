"""
Context manager for cleaning configuration (default options, strict mode).
"""

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any

# Context variable for strict option parsing
_strict_mode: ContextVar[bool] = ContextVar("strict_mode", default=False)

# Default option layers, outermost first
_option_layers: ContextVar[tuple[Mapping[str, Any], ...]] = ContextVar(
    "option_layers", default=()
)


def is_strict() -> bool:
    """Check if strict option parsing is currently enabled."""
    return _strict_mode.get()


def current_layers() -> tuple[Mapping[str, Any], ...]:
    """Default option layers set by enclosing cleaning contexts, outermost first."""
    return _option_layers.get()


@contextmanager
def cleaning_context(*, strict: bool | None = None, **defaults: Any) -> Iterator[None]:
    """
    Context manager for cleaning configuration.

    Args:
        strict: If True, malformed options raise pydantic.ValidationError
               instead of silently falling back to their defaults.
               None keeps the setting of the enclosing context.
        **defaults: Option defaults for every clean() call in scope.
                   Options passed to clean() itself still win.

    Example:
        from cleana import clean, cleaning_context

        with cleaning_context(clean_null=False):
            clean({"a": None, "b": ""})    # {"a": None}

        with cleaning_context(strict=True):
            clean({"a": 1}, in_place="sometimes")  # ValidationError!
    """
    strict_token = _strict_mode.set(strict) if strict is not None else None
    layers_token = (
        _option_layers.set(_option_layers.get() + (dict(defaults),))
        if defaults
        else None
    )
    try:
        yield
    finally:
        if layers_token is not None:
            _option_layers.reset(layers_token)
        if strict_token is not None:
            _strict_mode.reset(strict_token)

"""
Removal rules: user exclusions first, then the built-in empty-value rules.
"""

from typing import Any

from .classify import is_primitive
from .equality import deep_equal
from .options import Config
from .sentinels import MISSING, UNDEFINED


def _strict_equal(value: Any, candidate: Any) -> bool:
    """Identity, or equal primitives of the same concrete type."""
    if value is candidate:
        return True
    if type(value) is not type(candidate) or not is_primitive(value):
        return False
    try:
        return bool(value == candidate)
    except (TypeError, ValueError, ArithmeticError):
        # signaling Decimal NaN
        return False


def is_excluded(value: Any, config: Config) -> bool:
    """
    Check a value against `remove_values`.

    Every candidate is first tried by identity/strict equality; only when
    none matches is the list walked again with deep_equal(). Containers
    are matched too, so a whole nested record can be excluded.
    """
    candidates = config.remove_values
    if not candidates:
        return False

    for candidate in candidates:
        if _strict_equal(value, candidate):
            return True
    for candidate in candidates:
        if deep_equal(value, candidate):
            return True
    return False


def should_remove_primitive(value: Any, config: Config) -> bool:
    """Apply the built-in rules (None, UNDEFINED, "", NaN) to a primitive."""
    if value is None:
        return config.clean_null
    if value is UNDEFINED:
        return config.clean_undefined
    if value is MISSING:
        return True
    if isinstance(value, str):
        return config.clean_string and value == ""
    if isinstance(value, float) and value != value:
        return config.clean_nan
    return False


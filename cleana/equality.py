"""
Structural equality used to match values against `remove_values`.
"""

import re
from collections.abc import Mapping
from typing import Any

from .classify import Kind, classify, record_items


def deep_equal(a: Any, b: Any) -> bool:
    """
    Compare two values structurally.

    Unlike ==, NaN equals NaN and values of different concrete types never
    match, so 1, 1.0 and True are all distinct.

    Examples:
        deep_equal({"k": [1, 2]}, {"k": [1, 2]})    # True
        deep_equal(float("nan"), float("nan"))      # True
        deep_equal(1, True)                         # False
        deep_equal(re.compile("x", re.I), re.compile("x", re.I))  # True
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return False

    if isinstance(a, float):
        # true if both NaN
        return a == b or (a != a and b != b)

    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(deep_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, Mapping):
        return _items_equal(a, b)

    if isinstance(a, re.Pattern):
        return a.pattern == b.pattern and a.flags == b.flags

    if isinstance(a, (set, frozenset)):
        return len(a) == len(b) and all(item in b for item in a)

    if classify(a) is Kind.RECORD and type(a).__eq__ is object.__eq__:
        # Instance without its own equality: compare fields
        return _items_equal(dict(record_items(a)), dict(record_items(b)))

    try:
        return bool(a == b)
    except (TypeError, ValueError, ArithmeticError):
        # elementwise == on array-likes, signaling Decimal NaN
        return False


def _items_equal(a: Mapping[Any, Any], b: Mapping[Any, Any]) -> bool:
    if len(a) != len(b):
        return False
    for key in a:
        if key not in b:
            return False
    for key, value in a.items():
        if not deep_equal(value, b[key]):
            return False
    return True

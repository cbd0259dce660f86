"""
Sentinels for values that have no native Python spelling.

UNDEFINED stands for a value that was never assigned (removed when
``clean_undefined`` is on), MISSING marks an absent slot in a sequence or
record and is always skipped.
"""

from typing import Any


class _Sentinel:
    """Falsy singleton that keeps its identity through copy and pickle."""

    __slots__ = ("_name",)

    def __init__(self, name: str):
        self._name = name

    def __repr__(self) -> str:
        return self._name

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return self._name

    def __copy__(self) -> "_Sentinel":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "_Sentinel":
        return self


UNDEFINED = _Sentinel("UNDEFINED")
"""
A value that was declared but never assigned.

Examples:
    clean({"a": UNDEFINED, "b": 1})                          # {"b": 1}
    clean({"a": UNDEFINED}, clean_undefined=False)           # {"a": UNDEFINED}
"""

MISSING = _Sentinel("MISSING")
"""
An absent slot, like a hole in a sparse sequence.

MISSING never survives cleaning, whatever the options say:
    clean([MISSING, None, MISSING, 1], clean_null=False)     # [None, 1]
"""

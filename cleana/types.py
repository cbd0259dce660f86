"""
Result types for the recursive cleaner.

Every recursive step answers with either ``Kept(value)`` or ``REMOVED``.
REMOVED only travels from a child to its parent container and is never
written into output.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Kept(Generic[T]):
    """A value that survives cleaning, possibly rebuilt."""

    value: T


@dataclass(frozen=True, slots=True)
class Removed:
    """Signal telling the parent container to omit the value."""


REMOVED = Removed()

# Type aliases
CleanResult = Kept[Any] | Removed

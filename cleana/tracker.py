"""
Path-scoped detection of circular references.
"""

import logging
from typing import Any

logger = logging.getLogger(__name__)


class CircularReferenceTracker:
    """
    Records and sequences on the active recursion path.

    A value is entered before its children are cleaned and left right
    after, so only an ancestor reached again from one of its descendants
    counts as circular. The same object reached through two sibling
    branches is cleaned independently in each.
    """

    __slots__ = ("_active",)

    def __init__(self) -> None:
        self._active: set[int] = set()

    def enter(self, value: Any) -> bool:
        """Push a container; False if it is already an ancestor."""
        key = id(value)
        if key in self._active:
            logger.debug(
                "Dropping circular reference to %s at 0x%x",
                type(value).__name__,
                key,
            )
            return False
        self._active.add(key)
        return True

    def leave(self, value: Any) -> None:
        self._active.discard(id(value))

    def __contains__(self, value: Any) -> bool:
        return id(value) in self._active

    def __len__(self) -> int:
        return len(self._active)

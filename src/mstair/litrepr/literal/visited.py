# File: src/mstair/litrepr/literal/visited.py
"""
Grow-only registry of references met during one rendering call.
"""

from __future__ import annotations

import ctypes
from typing import Any

from mstair.litrepr.literal.model import ReferenceId


__all__ = ["VisitedSet", "reference_id"]


def reference_id(value: Any) -> ReferenceId:
    """
    Return the identity of the storage `value` refers to.

    A ctypes pointer is identified by its target's address; every other
    object by `id()`. The caller must not pass a null pointer.
    """
    if isinstance(value, ctypes._Pointer):
        target = value.contents
        return ReferenceId(ctypes.addressof(target), type(target))
    return ReferenceId(id(value), type(value))


class VisitedSet:
    """
    Identity registry for cycle detection.

    Entries are never removed, so a shared reference reached twice renders
    in full only the first time. Each recorded object is held until the set
    is dropped: an `id()` cannot be recycled by a temporary object (a
    property result, a ctypes `.contents` wrapper) while the call is running.

    Example:
        >>> items = []
        >>> items.append(items)
        >>> seen = VisitedSet()
        >>> seen.add(items)
        True
        >>> seen.add(items)
        False
    """

    __slots__ = ("_held",)

    _held: dict[ReferenceId, Any]

    def __init__(self) -> None:
        self._held = {}

    def __contains__(self, value: Any) -> bool:
        return reference_id(value) in self._held

    def __len__(self) -> int:
        return len(self._held)

    def add(self, value: Any) -> bool:
        """
        Record the reference; return False if it was already present.

        :param value: A Python object, or a non-null ctypes pointer.
        :return: True if this is the first time the reference is seen.
        """
        ref = reference_id(value)
        if ref in self._held:
            return False
        self._held[ref] = value.contents if isinstance(value, ctypes._Pointer) else value
        return True


# End of file: src/mstair/litrepr/literal/visited.py

# File: src/mstair/litrepr/literal/classify.py
"""
Value classification: maps a runtime value onto the Kind that renders it.
"""

import asyncio
import ctypes
import queue
import types
from collections import UserString, deque
from collections.abc import AsyncIterator, Coroutine, Iterator, Mapping, Sequence, Set
from enum import Enum
from typing import Any, Final, TypeVar, get_origin

from mstair.litrepr.literal.fields import is_record_value
from mstair.litrepr.literal.model import Kind, KindT


__all__ = [
    "classify",
    "has_identity",
    "is_nil",
    "scalar_view",
]

_CTYPE_CODE_KINDS: Final[dict[str, KindT]] = {
    "?": Kind.BOOL,
    "v": Kind.BOOL,
    "b": Kind.INT,
    "h": Kind.INT,
    "i": Kind.INT,
    "l": Kind.INT,
    "q": Kind.INT,
    "H": Kind.UINT,
    "I": Kind.UINT,
    "L": Kind.UINT,
    "Q": Kind.UINT,
    "B": Kind.BYTE,
    "c": Kind.BYTE,
    "P": Kind.ADDRESS,
    "f": Kind.FLOAT,
    "d": Kind.FLOAT,
    "g": Kind.FLOAT,
    "F": Kind.COMPLEX,
    "D": Kind.COMPLEX,
    "G": Kind.COMPLEX,
    "z": Kind.BYTES,
    "Z": Kind.STRING,
    "u": Kind.STRING,
}
"""ctypes `_type_` format codes of the simple types, by rendering kind."""

_PLAIN_SCALARS: Final[tuple[type, ...]] = (bool, int, float, complex, str, bytes, type(None))

_CHANNEL_TYPES: Final[tuple[type, ...]] = (
    queue.Queue,
    queue.SimpleQueue,
    asyncio.Queue,
    Iterator,
    AsyncIterator,
    Coroutine,
)

_VALUE_TYPES: Final[tuple[type, ...]] = (
    str,
    bytes,
    tuple,
    frozenset,
    range,
    memoryview,
    ctypes.Structure,
    ctypes.Union,
    ctypes.Array,
    ctypes._SimpleCData,
)
"""Values without reference identity; repeats of these render in full."""


def _is_simple_ctype(typ: Any) -> bool:
    return isinstance(typ, type) and issubclass(typ, ctypes._SimpleCData)


def scalar_view(declared: Any, value: Any) -> tuple[Any, Any]:
    """
    Return the runtime type to print for `value`, and the value to inspect.

    A ctypes scalar is replaced by its Python value but keeps its ctypes type.
    Field and element access on ctypes aggregates already hands out plain
    Python scalars; when the slot's declared type is a simple ctypes type,
    that type is restored. `py_object` wrappers expose the object they hold.
    """
    if isinstance(value, ctypes._SimpleCData):
        if type(value)._type_ == "O":
            return scalar_view(Any, value.value)
        return type(value), value.value
    if _is_simple_ctype(declared) and declared._type_ != "O" and isinstance(value, _PLAIN_SCALARS):
        return declared, value
    return type(value), value


def is_nil(value: Any) -> bool:
    """Return True for None and null ctypes pointers."""
    return value is None or (isinstance(value, ctypes._Pointer) and not value)


def has_identity(value: Any) -> bool:
    """Return True if `value` is reached by reference and must be tracked for cycles."""
    return not isinstance(value, _VALUE_TYPES)


def _is_type_descriptor(value: Any) -> bool:
    if value is Any:
        return True
    if isinstance(value, (type, types.GenericAlias, types.UnionType, TypeVar)):
        return True
    return get_origin(value) is not None


def classify(value: Any, rtype: Any) -> KindT:
    """
    Return the Kind of a value as seen through `scalar_view()`.

    :param value: The plain value.
    :param rtype: The runtime type; a ctypes simple type selects by format code.
    :return: The rendering kind. Plain objects that match nothing more
        specific are records of their attributes.
    """
    if is_nil(value):
        return Kind.NIL
    if _is_simple_ctype(rtype):
        return _CTYPE_CODE_KINDS.get(rtype._type_, Kind.UNSUPPORTED)
    if _is_type_descriptor(value):
        return Kind.TYPE
    if isinstance(value, bool):
        return Kind.BOOL
    if isinstance(value, Enum):
        return Kind.ENUM
    if isinstance(value, int):
        return Kind.INT
    if isinstance(value, float):
        return Kind.FLOAT
    if isinstance(value, complex):
        return Kind.COMPLEX
    if isinstance(value, (str, UserString)):
        return Kind.STRING
    if isinstance(value, (bytes, bytearray, memoryview)):
        return Kind.BYTES
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, ctypes._Pointer):
        return Kind.REFERENCE
    if is_record_value(value):
        return Kind.RECORD
    if isinstance(value, range):
        return Kind.OPAQUE
    if isinstance(value, (ctypes.Array, Sequence, Set, deque)):
        return Kind.SEQUENCE
    if isinstance(value, _CHANNEL_TYPES):
        return Kind.CHANNEL
    if callable(value):
        return Kind.FUNCTION
    if type(value).__repr__ is not object.__repr__:
        return Kind.OPAQUE
    return Kind.RECORD


# End of file: src/mstair/litrepr/literal/classify.py

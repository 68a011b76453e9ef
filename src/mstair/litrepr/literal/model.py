# File: src/mstair/litrepr/literal/model.py
"""
Shared vocabulary for literal rendering: kinds, references, fields, hooks.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import total_ordering
from typing import Any, ClassVar, Final, NamedTuple, Protocol, Self, runtime_checkable


__all__ = [
    "ANONYMOUS",
    "Kind",
    "KindT",
    "LiteralRepr",
    "LiteralReprError",
    "RecordField",
    "ReferenceId",
    "UnrecognizedKindError",
    "has_literal_method",
]


ANONYMOUS: Final[dict[str, bool]] = {"anonymous": True}
"""Dataclass field metadata marking the sole field of a transparent wrapper record."""


@total_ordering
class KindT:
    """Shape category of a runtime value; selects the routine that renders it."""

    _order: int
    """Unique identifier used for sorting and comparison."""

    name: str
    """Name of the kind, used for debugging and display."""

    def __init__(self, name: str, order: int) -> None:
        self.name = name
        self._order = order

    def __lt__(self, other: Self) -> bool:
        return self._order < other._order

    def __eq__(self, other: object) -> bool:
        return isinstance(other, KindT) and self._order == other._order

    def __hash__(self) -> int:
        return hash(self._order)

    def __format__(self, format_spec: str) -> str:
        return format(self.name, format_spec)

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class Kind:
    """Static namespace for all defined KindT value categories."""

    NIL = KindT("NIL", 1)
    TYPE = KindT("TYPE", 2)
    BOOL = KindT("BOOL", 3)
    INT = KindT("INT", 4)
    UINT = KindT("UINT", 5)
    BYTE = KindT("BYTE", 6)
    ADDRESS = KindT("ADDRESS", 7)
    FLOAT = KindT("FLOAT", 8)
    COMPLEX = KindT("COMPLEX", 9)
    STRING = KindT("STRING", 10)
    BYTES = KindT("BYTES", 11)
    ENUM = KindT("ENUM", 12)
    SEQUENCE = KindT("SEQUENCE", 13)
    MAPPING = KindT("MAPPING", 14)
    REFERENCE = KindT("REFERENCE", 15)
    RECORD = KindT("RECORD", 16)
    CHANNEL = KindT("CHANNEL", 17)
    FUNCTION = KindT("FUNCTION", 18)
    OPAQUE = KindT("OPAQUE", 19)
    UNSUPPORTED = KindT("UNSUPPORTED", 20)

    @classmethod
    def all(cls) -> list[KindT]:
        """
        Return all KindT constants defined on the class, in declaration order.
        """
        return [
            v
            for k, v in vars(cls).items()
            if isinstance(v, KindT) and not k.startswith("_") and k.isupper()
        ]


class ReferenceId(NamedTuple):
    """
    Identity of the storage behind a reference, for cycle detection.

    Pairs the address with the target type so that a struct and its first
    member, which share an address, stay distinct.

    :param address: `ctypes.addressof()` of a pointer target, or `id()` of a Python object.
    :param target_type: The type of the referenced object.
    """

    address: int
    target_type: type


class RecordField(NamedTuple):
    """
    One externally visible field of a record, in declaration order.

    :param name: Attribute name as printed before the colon.
    :param declared: Declared type from annotations or ctypes `_fields_`; `Any` when unknown.
    :param anonymous: True for the transparent member of a unit wrapper.
    """

    name: str
    declared: Any
    anonymous: bool = False


@runtime_checkable
class LiteralRepr(Protocol):
    """Values that render themselves; `__literal__` output is appended verbatim."""

    def __literal__(self) -> str: ...


def has_literal_method(value: object) -> bool:
    """
    Return True if the value's type provides `__literal__`.

    Inherited methods count. Classes themselves are never asked, because the
    attribute found on a class is the unbound instance method.
    """
    if isinstance(value, type):
        return False
    method: Callable[..., Any] | None = getattr(type(value), "__literal__", None)
    return callable(method)


class LiteralReprError(Exception):
    """Base class for errors raised by literal rendering."""


class UnrecognizedKindError(LiteralReprError, TypeError):
    """Raised when classification yields a kind no formatter handles; a library defect."""

    kind: KindT
    value_type: type

    MESSAGE: ClassVar[str] = "unrecognized value kind {kind} for {type_name}"

    def __init__(self, kind: KindT, value: object) -> None:
        self.kind = kind
        self.value_type = type(value)
        super().__init__(self.MESSAGE.format(kind=kind, type_name=self.value_type.__qualname__))


# End of file: src/mstair/litrepr/literal/model.py

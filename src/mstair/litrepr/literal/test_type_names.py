# File: src/mstair/litrepr/literal/test_type_names.py
"""
Tests for type display names and declared-type queries.
"""

from __future__ import annotations

import collections
import ctypes
from collections.abc import Callable, Mapping, Sequence
from typing import Annotated, Any, Literal, Optional, Protocol, TypeVar

import pytest

from mstair.litrepr.literal.declared import (
    is_default_literal_type,
    is_open_type,
    mapping_item_types,
    runtime_matches,
    sequence_item_type,
    unwrap_declared,
)
from mstair.litrepr.literal.type_names import type_name


T = TypeVar("T")


class Greeter(Protocol):
    def greet(self) -> str: ...


class Concrete:
    pass


# ---------- type_name ----------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("typ", "expected"),
    [
        (int, "int"),
        (str, "str"),
        (bytes, "bytes"),
        (type(None), "None"),
        (list[int], "list[int]"),
        (dict[str, list[int]], "dict[str, list[int]]"),
        (tuple[int, ...], "tuple[int, ...]"),
        (int | None, "int | None"),
        (Optional[str], "str | None"),  # noqa: UP045
        (Annotated[int, "meta"], "int"),
        (Literal["a", 1], "Literal['a', 1]"),
        (Any, "Any"),
        (T, "T"),
        ("Forward", "Forward"),
        (Callable[[int], str], "collections.abc.Callable[[int], str]"),
        (collections.OrderedDict, "collections.OrderedDict"),
        (ctypes.c_int, "ctypes.c_int"),
        (ctypes.c_uint8, "byte"),
        (ctypes.POINTER(ctypes.c_int), "*ctypes.c_int"),
        (ctypes.c_double * 4, "[4]ctypes.c_double"),
        (ctypes.POINTER(ctypes.c_int * 2), "*[2]ctypes.c_int"),
    ],
)
def test_type_name(typ: Any, expected: str) -> None:
    assert type_name(typ) == expected


@pytest.mark.unit
def test_type_name_elides_package_prefix() -> None:
    assert type_name(collections.OrderedDict, "collections") == "OrderedDict"
    assert type_name(ctypes.c_int, "ctypes") == "c_int"
    assert type_name(Concrete, __name__) == "Concrete"
    assert type_name(Concrete) == f"{__name__}.Concrete"
    assert type_name(collections.OrderedDict, "collect") == "collections.OrderedDict"


@pytest.mark.unit
def test_type_name_strips_locals_segment() -> None:
    class Local:
        pass

    assert type_name(Local, __name__) == "Local"


# ---------- declared types ----------


@pytest.mark.unit
@pytest.mark.parametrize(
    ("typ", "expected"),
    [
        (Any, True),
        (object, True),
        (T, True),
        ("Forward", True),
        (int | str, True),
        (Optional[Any], True),  # noqa: UP045
        (Sequence[int], True),
        (Mapping, True),
        (Greeter, True),
        (int, False),
        (int | None, False),
        (list[int], False),
        (Concrete, False),
        (ctypes.c_int, False),
        (Annotated[str, "meta"], False),
    ],
)
def test_is_open_type(typ: Any, expected: bool) -> None:
    assert is_open_type(typ) is expected


@pytest.mark.unit
def test_unwrap_declared() -> None:
    assert unwrap_declared(int | None) is int
    assert unwrap_declared(Annotated[int | None, "meta"]) is int
    assert unwrap_declared(int | str) == int | str


@pytest.mark.unit
def test_runtime_matches() -> None:
    assert runtime_matches(list[int], [1])
    assert runtime_matches(int | None, 3)
    assert not runtime_matches(Sequence[int], [1])
    assert not runtime_matches(int, True)
    assert not runtime_matches(Any, 1)


@pytest.mark.unit
def test_sequence_item_type() -> None:
    assert sequence_item_type(list[int], [1], 0) is int
    assert sequence_item_type(tuple[int, str], (1, "a"), 1) is str
    assert sequence_item_type(tuple[int, str], (1, "a", 2), 2) is Any
    assert sequence_item_type(tuple[int, ...], (1, 2, 3), 2) is int
    assert sequence_item_type(list, [1], 0) is Any
    assert sequence_item_type(Any, (ctypes.c_short * 2)(), 0) is ctypes.c_short


@pytest.mark.unit
def test_mapping_item_types() -> None:
    assert mapping_item_types(dict[str, int]) == (str, int)
    assert mapping_item_types(dict[str, int] | None) == (str, int)
    assert mapping_item_types(dict) == (Any, Any)


@pytest.mark.unit
def test_is_default_literal_type() -> None:
    assert is_default_literal_type(int)
    assert is_default_literal_type(ctypes.c_int)
    assert is_default_literal_type(ctypes.c_wchar_p)
    assert not is_default_literal_type(ctypes.c_ushort)


# End of file: src/mstair/litrepr/literal/test_type_names.py

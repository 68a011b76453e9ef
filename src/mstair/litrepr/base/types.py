# File: src/mstair/litrepr/base/types.py

from decimal import Decimal
from fractions import Fraction
from typing import Final, Self


# Values a log call can interpolate without rendering them as literals.
PRIMITIVE_TYPES: Final[tuple[type, ...]] = (int, float, complex, bool, Decimal, Fraction, type(None), str)

LITERAL_NATIVE_TYPES: Final[tuple[type, ...]] = (bool, int, float, complex, str)
"""Types a bare literal implies on its own, so they never need a conversion wrapper."""


class Missing:
    """
    Falsy singleton for "no value supplied", distinct from an explicit None.

    Used where None is itself a meaningful argument, e.g. a declared type of
    `type(None)` versus no declared type at all.
    """

    __slots__ = ()

    _instance: "Missing | None" = None

    def __new__(cls) -> Self:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "MISSING"

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, _memo: dict[int, object]) -> Self:
        return self


MISSING: Final[Missing] = Missing()


def int_from_string(value: str | None, default: int = 0) -> int:
    """
    Parse an integer from environment-style text.

    :param value: Text to parse; surrounding whitespace is ignored.
    :param default: Returned when `value` is None, blank, or not an integer.
    :return: The parsed integer or `default`.
    """
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        return default


# End of file: src/mstair/litrepr/base/types.py

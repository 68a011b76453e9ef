# File: src/mstair/litrepr/literal/conf.py
"""
Rendering options and their presets.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from mstair.litrepr.base.config import in_desktop_mode
from mstair.litrepr.base.constants import (
    DEFAULT_INDENT,
    K_LITREPR_INDENT,
    K_LITREPR_PKG,
    K_LITREPR_ZERO_FIELDS,
    TRUTHY_STRINGS,
)
from mstair.litrepr.base.fs_helpers import fs_load_dotenv
from mstair.litrepr.base.types import int_from_string


if TYPE_CHECKING:
    from mstair.litrepr.literal.formatter import Fmt


__all__ = [
    "CONF_DEFAULT",
    "CONF_FULL",
    "CONF_SINGLE",
    "Conf",
]


@dataclass(frozen=True, slots=True, kw_only=True)
class Conf:
    """
    Immutable rendering options, safe to share between threads.

    :param indent: Text written once per nesting level; empty selects single-line output.
    :param zero_fields: Print record fields that hold their type's zero value.
    :param pkg: Module prefix that is dropped from printed type names.
    """

    indent: str = DEFAULT_INDENT
    zero_fields: bool = False
    pkg: str = ""

    @property
    def is_single(self) -> bool:
        return not self.indent

    @property
    def is_multi(self) -> bool:
        return bool(self.indent)

    @property
    def skip_zero_fields(self) -> bool:
        return not self.zero_fields

    def fmt(self, level: int = 0) -> Fmt:
        """
        Return a single-use formatter starting at indentation `level`.

        :raises ValueError: If `level` is negative.
        """
        from mstair.litrepr.literal.formatter import Fmt  # noqa: PLC0415

        return Fmt(self, level)

    @classmethod
    def from_environment(cls) -> Conf:
        """
        Build options from ``LITREPR_*`` variables, after loading a .env file.

        ``LITREPR_INDENT`` is a number of spaces, ``tab``, or empty for
        single-line output; unset keeps the default indent.
        ``LITREPR_ZERO_FIELDS`` is a boolean flag. ``LITREPR_PKG`` names
        the module prefix to elide.
        """
        fs_load_dotenv()
        raw_indent = os.environ.get(K_LITREPR_INDENT)
        if raw_indent is None:
            indent = DEFAULT_INDENT
        elif raw_indent.strip().lower() == "tab":
            indent = "\t"
        else:
            indent = " " * max(0, int_from_string(raw_indent, 0))
        zero_fields = os.environ.get(K_LITREPR_ZERO_FIELDS, "").strip().lower() in TRUTHY_STRINGS
        pkg = os.environ.get(K_LITREPR_PKG, "").strip()
        return cls(indent=indent, zero_fields=zero_fields, pkg=pkg)

    @classmethod
    def calculated(cls) -> Conf:
        """Return multi-line options on a desktop terminal, single-line elsewhere."""
        return CONF_DEFAULT if in_desktop_mode() else CONF_SINGLE


CONF_DEFAULT: Final[Conf] = Conf()
"""Multi-line, four-space indent, zero-valued fields elided."""

CONF_FULL: Final[Conf] = Conf(zero_fields=True)
"""Multi-line with every record field shown."""

CONF_SINGLE: Final[Conf] = Conf(indent="")
"""Single-line output, as used in log lines."""


# End of file: src/mstair/litrepr/literal/conf.py

# File: src/mstair/litrepr/base/constants.py

from typing import Final


DEFAULT_INDENT: Final[str] = "    "
"""Indent added per nesting level in multi-line literals."""

# Environment variable names

K_LITREPR_INDENT = "LITREPR_INDENT"
"""Spaces per level, "tab", or empty for single-line output."""
K_LITREPR_ZERO_FIELDS = "LITREPR_ZERO_FIELDS"
"""Truthy to print zero-valued record fields."""
K_LITREPR_PKG = "LITREPR_PKG"
"""Module prefix elided from printed type names."""

K_LOG_FORMAT = "LOG_FORMAT"
K_LOG_DATEFMT = "LOG_DATEFMT"
K_LOG_TZ = "LOG_TZ"

# Logging defaults

DEFAULT_LOG_FORMAT = r"%(levelName)s %(asctime)s %(fileAndLine)s %(funcAndName)s %(message)s"
DEFAULT_LOG_DATEFMT = "%H:%M:%S"
DEFAULT_LOG_TZ = "UTC"

TRUTHY_STRINGS: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


# End of file: src/mstair/litrepr/base/constants.py

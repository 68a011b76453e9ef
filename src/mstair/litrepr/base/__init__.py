"""
package: mstair.litrepr.base
"""

# <AUTOGEN_INIT>
from mstair.litrepr.base import (
    config,
    constants,
    fs_helpers,
    types,
)


__all__ = [
    "config",
    "constants",
    "fs_helpers",
    "types",
]
# </AUTOGEN_INIT>

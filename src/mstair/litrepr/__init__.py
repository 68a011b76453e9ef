"""
package: mstair.litrepr
"""

# <AUTOGEN_INIT>
from mstair.litrepr import (
    base,
    literal,
    xlogging,
)


__all__ = [
    "base",
    "literal",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"

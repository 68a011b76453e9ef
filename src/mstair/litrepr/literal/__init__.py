"""
package: mstair.litrepr.literal
"""

# <AUTOGEN_INIT>
from mstair.litrepr.literal import (
    buffer,
    classify,
    conf,
    declared,
    fields,
    formatter,
    literal_api,
    model,
    text,
    type_names,
    visited,
)


__all__ = [
    "buffer",
    "classify",
    "conf",
    "declared",
    "fields",
    "formatter",
    "literal_api",
    "model",
    "text",
    "type_names",
    "visited",
]
# </AUTOGEN_INIT>

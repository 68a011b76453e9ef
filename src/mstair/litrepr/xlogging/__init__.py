"""
package: mstair.litrepr.xlogging
"""

# <AUTOGEN_INIT>
from mstair.litrepr.xlogging import (
    core_logger,
    logger_constants,
    logger_factory,
    logger_formatter,
    logger_util,
)


__all__ = [
    "core_logger",
    "logger_constants",
    "logger_factory",
    "logger_formatter",
    "logger_util",
]
# </AUTOGEN_INIT>

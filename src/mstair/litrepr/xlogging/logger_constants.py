# File: src/mstair/litrepr/xlogging/logger_constants.py

import logging


K_CALLER_CLASS_NAME = "caller_class_name"

TRACE = logging.DEBUG - 1  # (9) LOG.trace() will not output at DEBUG level
SUPPRESS = -1  # Never shown; for records that exist only to be inspected in tests


_logging_constants_initialized = False


def initialize_logger_constants() -> None:
    """Register the custom level names with the logging module, once."""
    global _logging_constants_initialized
    if _logging_constants_initialized:
        return
    _logging_constants_initialized = True
    for key, value in {
        "TRACE": TRACE,
        "SUPPRESS": SUPPRESS,
    }.items():
        if key not in logging.getLevelNamesMapping():
            logging.addLevelName(value, key)


# End of file: src/mstair/litrepr/xlogging/logger_constants.py

# File: src/mstair/litrepr/xlogging/logger_factory.py
"""
Logger factory for CoreLogger instances.

Names loggers after the calling module when no name is given and maps
`__main__` to the script's stem.
"""

import inspect
import logging
import sys
from pathlib import Path

from mstair.litrepr.xlogging.core_logger import CoreLogger


def create_logger(
    name: str | None,
    *,
    level: int | str | None = None,
    stacklevel: int = 1,
) -> CoreLogger:
    """
    Return a CoreLogger with a consistent, context-aware name.

    :param name: Logger name, usually `__name__`; None or "" derives it from the caller.
    :param level: Optional explicit level, overriding the environment.
    :param stacklevel: Frames to skip when deriving the name from the caller.
    :return: The CoreLogger registered under the resolved name.
    """
    logger_name: str = name or get_caller_logger_name(stacklevel=stacklevel + 1)
    if logger_name == "__main__":
        logger_name = _main_logger_name()

    existing = logging.Logger.manager.loggerDict.get(logger_name)
    logger = existing if isinstance(existing, CoreLogger) else _get_core_logger_from_logging(logger_name)

    if level is not None:
        logger.setLevel(level)
    return logger


def _get_core_logger_from_logging(name: str) -> CoreLogger:
    """
    Create a CoreLogger through logging.getLogger() so it joins the logger hierarchy.

    :param name: Logger name.
    :return: CoreLogger instance.
    :raises TypeError: If a plain logger already holds the name.
    """
    logging_class = logging.getLoggerClass()
    logging.setLoggerClass(CoreLogger)
    try:
        logger = logging.getLogger(name)
    finally:
        logging.setLoggerClass(logging_class)
    if not isinstance(logger, CoreLogger):
        raise TypeError(f"Failed to create CoreLogger: {logger!r}")
    return logger


def get_caller_logger_name(*, stacklevel: int = 1) -> str:
    """
    Return the module name of the caller `stacklevel` frames up.
    """
    frame = inspect.currentframe()
    try:
        for _ in range(stacklevel):
            frame = frame.f_back if frame else None
        name: str = frame.f_globals.get("__name__", "") if frame else ""
    finally:
        del frame
    return name if name and name != "__main__" else _main_logger_name()


def _main_logger_name() -> str:
    """Name for loggers created in `__main__`: the script stem, else the interpreter stem."""
    arg0 = Path(sys.argv[0]) if sys.argv and sys.argv[0] else None
    if arg0 and arg0.exists():
        return arg0.stem
    exe = Path(sys.executable or "")
    return exe.stem if exe.exists() else "embedded_main"


# End of file: src/mstair/litrepr/xlogging/logger_factory.py

# File: src/mstair/litrepr/base/config.py
"""
Execution context detection for output decisions.

Literal rendering and log formatting both depend on where the process runs:
an interactive desktop gets multi-line literals and colored log levels,
while Lambda and static-analysis contexts get compact, colorless output.
Flags are overridable per thread so tests can pin a context without touching
the environment.

Exports:
- analysis_mode_context(): context manager for analysis mode.
- in_analysis_mode(): check if analysis mode is active.
- in_lambda(): check or override whether code is running in AWS Lambda.
- in_test_mode(): check or override whether code is in test mode.
- in_desktop_mode(): check or override whether output targets a human.
"""

from __future__ import annotations

import os
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass


_tls = threading.local()


@dataclass
class TLSAttrs:
    """Per-thread context flags and overrides."""

    in_code_analyzer: bool = False
    in_lambda_override: bool | None = None
    in_test_mode_override: bool | None = None
    in_desktop_mode_override: bool | None = None


def _get_tls() -> TLSAttrs:
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def _apply_override(attr: str, *, unset_override: bool, override: bool | None) -> bool | None:
    """Update the named override on this thread and return the value now in force."""
    tls = _get_tls()
    if unset_override:
        setattr(tls, attr, None)
    if override is not None:
        setattr(tls, attr, override)
    return getattr(tls, attr)


@contextmanager
def analysis_mode_context() -> Iterator[None]:
    """
    Enable code analysis mode for the duration of the block.

    Nested contexts restore the previous value on exit.
    """
    tls = _get_tls()
    previous_state = tls.in_code_analyzer
    tls.in_code_analyzer = True
    try:
        yield
    finally:
        tls.in_code_analyzer = previous_state


def in_analysis_mode() -> bool:
    """True while an `analysis_mode_context()` block is open on this thread."""
    return _get_tls().in_code_analyzer


def in_lambda(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Report whether the process runs inside AWS Lambda, per its runtime variables.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if in Lambda context, False otherwise.
    """
    forced = _apply_override("in_lambda_override", unset_override=unset_override, override=override)
    if forced is not None:
        return forced
    return bool(os.environ.get("AWS_LAMBDA_FUNCTION_NAME") or os.environ.get("LAMBDA_RUNTIME_DIR"))


def in_test_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Check if running under a test runner, with optional override.

    Detection order:
      1. Analysis mode (always False).
      2. Explicit thread-local override.
      3. pytest or unittest already imported.
      4. PYTEST_CURRENT_TEST, CI=true or APP_TEST_MODE=1 in the environment.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if test mode is active, False otherwise.
    """
    if in_analysis_mode():
        return False

    forced = _apply_override(
        "in_test_mode_override", unset_override=unset_override, override=override
    )
    if forced is not None:
        return forced
    if "pytest" in sys.modules or "unittest" in sys.modules:
        return True

    env = os.environ
    return bool(
        env.get("PYTEST_CURRENT_TEST")
        or env.get("CI") == "true"
        or env.get("APP_TEST_MODE") == "1"
    )


def in_desktop_mode(
    *,
    unset_override: bool = False,
    override: bool | None = None,
) -> bool:
    """
    Determine if output is read by a person at a terminal.

    Rules:
      - Explicit override wins.
      - True in test mode.
      - False in analysis or Lambda environments.
      - Otherwise True.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If True or False, sets the override for this thread.
    :return: True if desktop mode is active, False otherwise.
    """
    forced = _apply_override(
        "in_desktop_mode_override", unset_override=unset_override, override=override
    )
    if forced is not None:
        return forced

    if in_test_mode():
        return True
    if in_analysis_mode():
        return False
    return not in_lambda()


# End of file: src/mstair/litrepr/base/config.py
